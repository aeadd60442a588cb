# finance_tracker/schemas/records.py
# Filas de solo lectura que consume el motor de agregación.

from typing import Optional

from pydantic import BaseModel, ConfigDict

from finance_tracker.models.enums import PayoutStatus
from finance_tracker.schemas.income_source import IncomeSourceRef
from finance_tracker.schemas.payout_category import PayoutCategoryRef

class IncomeRecord(BaseModel):
    week: int
    month: int
    year: int
    net_amount: float
    gross_amount: float = 0.0
    source: Optional[IncomeSourceRef] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

class PayoutRecord(BaseModel):
    month: int
    year: int
    amount: float
    status: PayoutStatus = PayoutStatus.pending
    category: Optional[PayoutCategoryRef] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)
