from datetime import date as dt_date, datetime, timezone
from typing import Optional
from uuid import UUID

from sqlmodel import SQLModel, Field, Relationship

from finance_tracker.models.enums import PaymentFrequency
from finance_tracker.models.income_source import IncomeSource

class IncomeEntry(SQLModel, table=True):
    __tablename__ = "income_entry"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    date: dt_date
    week: int  # 1-5, ceil(día / 7)
    month: int = Field(index=True)  # 1-12
    year: int = Field(index=True)
    payment_frequency: PaymentFrequency = Field(default=PaymentFrequency.monthly)
    gross_amount: float
    net_amount: float
    currency: str = Field(default="PHP")
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Fuente del ingreso; puede no resolverse si fue borrada por fuera de la API
    source_id: Optional[int] = Field(default=None, foreign_key="income_source.id")
    source: Optional[IncomeSource] = Relationship(back_populates="entries")
