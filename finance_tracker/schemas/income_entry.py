import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance_tracker.core.config import DEFAULT_CURRENCY
from finance_tracker.models.enums import PaymentFrequency
from finance_tracker.schemas.income_source import IncomeSourceRef

MAX_AMOUNT = 10_000_000
MIN_YEAR = 2020
MAX_YEAR = 2100


def check_year(value: Optional[dt.date]) -> Optional[dt.date]:
    if value is not None and not (MIN_YEAR <= value.year <= MAX_YEAR):
        raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    return value


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        return None
    return value


class IncomeEntryCreate(BaseModel):
    date: dt.date
    # Si no se envía, se calcula a partir de la fecha
    week: Optional[int] = Field(default=None, ge=1, le=5)
    source_id: int
    payment_frequency: PaymentFrequency = PaymentFrequency.monthly
    gross_amount: float = Field(gt=0, le=MAX_AMOUNT)
    net_amount: float = Field(gt=0, le=MAX_AMOUNT)
    currency: str = DEFAULT_CURRENCY
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("date")
    @classmethod
    def year_in_range(cls, v):
        return check_year(v)

    @field_validator("notes")
    @classmethod
    def empty_notes(cls, v):
        return blank_to_none(v)


class IncomeEntryUpdate(BaseModel):
    date: Optional[dt.date] = None
    week: Optional[int] = Field(default=None, ge=1, le=5)
    source_id: Optional[int] = None
    payment_frequency: Optional[PaymentFrequency] = None
    gross_amount: Optional[float] = Field(default=None, gt=0, le=MAX_AMOUNT)
    net_amount: Optional[float] = Field(default=None, gt=0, le=MAX_AMOUNT)
    currency: Optional[str] = None
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("date")
    @classmethod
    def year_in_range(cls, v):
        return check_year(v)

    @field_validator("notes")
    @classmethod
    def empty_notes(cls, v):
        return blank_to_none(v)


class IncomeEntryRead(BaseModel):
    id: int
    date: dt.date
    week: int
    month: int
    year: int
    source_id: Optional[int] = None
    payment_frequency: PaymentFrequency
    gross_amount: float
    net_amount: float
    currency: str
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime
    source: Optional[IncomeSourceRef] = None  # None cuando la fuente no se resuelve

    model_config = ConfigDict(from_attributes=True)
