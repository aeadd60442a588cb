from datetime import datetime, timezone
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID

from sqlmodel import SQLModel, Field, Relationship

from finance_tracker.models.enums import IncomeSourceType

if TYPE_CHECKING:
    from finance_tracker.models.income_entry import IncomeEntry

class IncomeSource(SQLModel, table=True):
    __tablename__ = "income_source"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str
    type: IncomeSourceType = Field(default=IncomeSourceType.salary)
    color: str
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    entries: List["IncomeEntry"] = Relationship(back_populates="source")
