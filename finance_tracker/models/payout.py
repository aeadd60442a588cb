from datetime import date as dt_date, datetime, timezone
from typing import Optional
from uuid import UUID

from sqlmodel import SQLModel, Field, Relationship

from finance_tracker.models.enums import PayoutStatus
from finance_tracker.models.payout_category import PayoutCategory

class Payout(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    date: dt_date
    month: int = Field(index=True)  # 1-12
    year: int = Field(index=True)
    amount: float
    status: PayoutStatus = Field(default=PayoutStatus.pending)  # solo informativo, no afecta los totales
    due_date: Optional[dt_date] = None
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    category_id: Optional[int] = Field(default=None, foreign_key="payout_category.id")
    category: Optional[PayoutCategory] = Relationship(back_populates="payouts")
