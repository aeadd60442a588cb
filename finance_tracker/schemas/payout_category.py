import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from finance_tracker.models.enums import PayoutCategoryType
from finance_tracker.schemas.income_source import COLOR_PATTERN

class PayoutCategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    type: PayoutCategoryType
    target_amount: Optional[float] = Field(default=None, ge=0)
    color: str = Field(pattern=COLOR_PATTERN)
    icon: Optional[str] = Field(default=None, max_length=50)

class PayoutCategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    type: Optional[PayoutCategoryType] = None
    target_amount: Optional[float] = Field(default=None, ge=0)
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)
    icon: Optional[str] = Field(default=None, max_length=50)

class PayoutCategoryRef(BaseModel):
    id: int
    name: str
    type: PayoutCategoryType
    color: str
    icon: Optional[str] = None
    target_amount: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)

class PayoutCategoryRead(PayoutCategoryCreate):
    id: int
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)
