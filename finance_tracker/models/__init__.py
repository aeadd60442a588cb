from finance_tracker.models.user import User
from finance_tracker.models.income_source import IncomeSource
from finance_tracker.models.income_entry import IncomeEntry
from finance_tracker.models.payout_category import PayoutCategory
from finance_tracker.models.payout import Payout

__all__ = ["User", "IncomeSource", "IncomeEntry", "PayoutCategory", "Payout"]
