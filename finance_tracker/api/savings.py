# finance_tracker/api/savings.py

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from loguru import logger

from finance_tracker.core.config import SAVINGS_MODE, SAVINGS_RATE
from finance_tracker.repositories.records import RecordRepository, get_record_repository
from finance_tracker.schemas.savings import MonthlySavingsRead, SavingsMode, SavingsReport
from finance_tracker.services.aggregation import (
    build_savings_report,
    monthly_savings_view,
    summarize_month,
    summarize_year,
)
from finance_tracker.utils.dates import month_name

router = APIRouter(prefix="/savings", tags=["savings"])


def get_savings_mode() -> SavingsMode:
    return SavingsMode(SAVINGS_MODE)


def get_savings_rate() -> float:
    """Tasa por defecto del modo fixed_rate; ValueError si está fuera de 0..1."""
    if not (0 <= SAVINGS_RATE <= 1):
        raise ValueError(f"SAVINGS_RATE must be between 0 and 1, got {SAVINGS_RATE}")
    return SAVINGS_RATE


def _resolve_rate(mode: SavingsMode, rate: Optional[float]) -> Optional[float]:
    """La tasa solo existe en modo fixed_rate; en el otro modo se rechaza."""
    if mode == SavingsMode.fixed_rate:
        if rate is not None:
            return rate
        try:
            return get_savings_rate()
        except ValueError as exc:
            logger.error("Invalid savings configuration: {}", exc)
            raise HTTPException(
                status_code=503,
                detail="Savings rate is misconfigured on the server.",
            ) from exc
    if rate is not None:
        raise HTTPException(
            status_code=400,
            detail="A savings rate only applies when SAVINGS_MODE is fixed_rate.",
        )
    return None


@router.get("", response_model=SavingsReport)
@router.get("/", response_model=SavingsReport)
def get_savings_by_year(
    year: Optional[int] = Query(None),
    rate: Optional[float] = Query(None, ge=0, le=1),
    mode: SavingsMode = Depends(get_savings_mode),
    repository: RecordRepository = Depends(get_record_repository),
):
    """Ahorro del año desglosado por mes y semana (solo meses con ingresos)."""
    year = year or date.today().year
    rate = _resolve_rate(mode, rate)

    summaries = summarize_year(
        repository.fetch_income(year),
        repository.fetch_payouts(year),
        year,
        mode=mode,
        rate=rate,
    )
    return build_savings_report(year, summaries, mode, rate)


@router.get("/{year}/{month}", response_model=MonthlySavingsRead)
def get_savings_by_month(
    year: int,
    month: int = Path(..., ge=1, le=12),
    rate: Optional[float] = Query(None, ge=0, le=1),
    mode: SavingsMode = Depends(get_savings_mode),
    repository: RecordRepository = Depends(get_record_repository),
):
    rate = _resolve_rate(mode, rate)

    summary = summarize_month(
        repository.fetch_income(year, month),
        repository.fetch_payouts(year, month),
        year,
        month,
        mode=mode,
        rate=rate,
    )
    if summary is None:
        raise HTTPException(
            status_code=404,
            detail=f"No income entries found for {month_name(month)} {year}",
        )
    return monthly_savings_view(summary, mode, rate)
