import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from finance_tracker.models.enums import IncomeSourceType

COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

class IncomeSourceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    type: IncomeSourceType
    color: str = Field(pattern=COLOR_PATTERN)
    is_active: bool = True

class IncomeSourceUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    type: Optional[IncomeSourceType] = None
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)
    is_active: Optional[bool] = None

class IncomeSourceRef(BaseModel):
    """Atributos de la fuente que se muestran junto a cada ingreso."""
    id: int
    name: str
    type: IncomeSourceType
    color: str

    model_config = ConfigDict(from_attributes=True)

class IncomeSourceRead(IncomeSourceCreate):
    id: int
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)
