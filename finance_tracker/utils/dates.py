import math
from datetime import date
from typing import Optional

from finance_tracker.constants.months import MONTH_ABBREVIATIONS, MONTH_NAMES


def week_of_month(d: date) -> int:
    """Semana del mes (1-5) como ceil(día / 7)."""
    return math.ceil(d.day / 7)


def month_name(month: int) -> str:
    """Nombre completo en inglés, independiente del locale; '' fuera de rango."""
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return ""


def month_abbreviation(month: int) -> str:
    if 1 <= month <= 12:
        return MONTH_ABBREVIATIONS[month - 1]
    return ""


def period_fields(d: date, week: Optional[int] = None) -> dict:
    """Semana, mes y año que se guardan junto a un registro fechado."""
    return {
        "week": week or week_of_month(d),
        "month": d.month,
        "year": d.year,
    }
