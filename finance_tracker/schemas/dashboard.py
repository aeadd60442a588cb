# finance_tracker/schemas/dashboard.py

from typing import List, Optional

from pydantic import BaseModel

from finance_tracker.models.enums import PayoutCategoryType
from finance_tracker.schemas.income_entry import IncomeEntryRead

class IncomeMonthSummary(BaseModel):
    total_gross_income: float
    total_net_income: float
    entry_count: int
    average_net_per_entry: float

class YearlyIncomePoint(BaseModel):
    month: int
    month_name: str
    total_gross: float
    total_net: float

class YearlyPayoutPoint(BaseModel):
    month: int
    month_name: str
    total_payouts: float

class CategoryPayoutSummary(BaseModel):
    category_id: Optional[int] = None
    category_name: str
    category_type: Optional[PayoutCategoryType] = None
    color: Optional[str] = None
    target_amount: Optional[float] = None
    total: float
    paid_total: float
    count: int
    share: float

class DashboardRead(BaseModel):
    year: int
    month: int
    month_name: str
    income: IncomeMonthSummary
    current_month_payouts: float
    yearly_income: List[YearlyIncomePoint]
    yearly_payouts: List[YearlyPayoutPoint]
    recent_entries: List[IncomeEntryRead]
