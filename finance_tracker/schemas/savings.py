from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

class SavingsMode(str, Enum):
    net_minus_payouts = "net_minus_payouts"
    fixed_rate = "fixed_rate"

class WeeklyBucket(BaseModel):
    week: int
    net_amount: float

class MonthlySummary(BaseModel):
    month: int
    year: int
    month_name: str
    weeks: List[WeeklyBucket]
    total_net_amount: float
    total_payouts: float
    total_savings: float

class WeeklySavingsRead(WeeklyBucket):
    share_of_month: float
    # Solo en modo fixed_rate
    savings: Optional[float] = None
    remaining: Optional[float] = None

class MonthlySavingsRead(BaseModel):
    month: int
    year: int
    month_name: str
    weeks: List[WeeklySavingsRead]
    total_net_amount: float
    total_payouts: float
    total_savings: float
    remaining: float
    savings_rate_actual: float

class SavingsReport(BaseModel):
    year: int
    mode: SavingsMode
    rate: Optional[float] = None
    months: List[MonthlySavingsRead]
    total_net_amount: float
    total_payouts: float
    total_savings: float
    total_remaining: float
    months_with_income: int
