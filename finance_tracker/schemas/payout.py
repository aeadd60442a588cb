import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance_tracker.models.enums import PayoutStatus
from finance_tracker.schemas.income_entry import MAX_AMOUNT, blank_to_none, check_year
from finance_tracker.schemas.payout_category import PayoutCategoryRef

class PayoutCreate(BaseModel):
    date: dt.date
    category_id: int
    amount: float = Field(gt=0, le=MAX_AMOUNT)
    status: PayoutStatus = PayoutStatus.pending
    due_date: Optional[dt.date] = None
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("date")
    @classmethod
    def year_in_range(cls, v):
        return check_year(v)

    @field_validator("notes")
    @classmethod
    def empty_notes(cls, v):
        return blank_to_none(v)

class PayoutUpdate(BaseModel):
    date: Optional[dt.date] = None
    category_id: Optional[int] = None
    amount: Optional[float] = Field(default=None, gt=0, le=MAX_AMOUNT)
    status: Optional[PayoutStatus] = None
    due_date: Optional[dt.date] = None
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("date")
    @classmethod
    def year_in_range(cls, v):
        return check_year(v)

    @field_validator("notes")
    @classmethod
    def empty_notes(cls, v):
        return blank_to_none(v)

class PayoutRead(BaseModel):
    id: int
    date: dt.date
    month: int
    year: int
    category_id: Optional[int] = None
    amount: float
    status: PayoutStatus
    due_date: Optional[dt.date] = None
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime
    category: Optional[PayoutCategoryRef] = None

    model_config = ConfigDict(from_attributes=True)
