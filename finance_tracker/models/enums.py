from enum import Enum

class IncomeSourceType(str, Enum):
    salary = "salary"
    freelance = "freelance"
    business = "business"
    investment = "investment"
    other = "other"

class PaymentFrequency(str, Enum):
    weekly = "weekly"
    bi_weekly = "bi_weekly"
    monthly = "monthly"

class PayoutCategoryType(str, Enum):
    savings = "savings"
    obligation = "obligation"
    personal = "personal"
    expense = "expense"
    other = "other"

class PayoutStatus(str, Enum):
    pending = "pending"
    not_paid = "not_paid"
    partially_paid = "partially_paid"
    paid = "paid"
