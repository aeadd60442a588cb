from datetime import datetime, timezone
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID

from sqlmodel import SQLModel, Field, Relationship

from finance_tracker.models.enums import PayoutCategoryType

if TYPE_CHECKING:
    from finance_tracker.models.payout import Payout

class PayoutCategory(SQLModel, table=True):
    __tablename__ = "payout_category"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str
    type: PayoutCategoryType = Field(default=PayoutCategoryType.expense)
    target_amount: Optional[float] = None
    color: str
    icon: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    payouts: List["Payout"] = Relationship(back_populates="category")
