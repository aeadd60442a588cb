# finance_tracker/api/dashboard.py

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import joinedload
from sqlmodel import Session, select

from finance_tracker.core.security import get_current_user
from finance_tracker.database import get_session
from finance_tracker.models.income_entry import IncomeEntry
from finance_tracker.repositories.records import RecordRepository, get_record_repository
from finance_tracker.schemas.dashboard import DashboardRead
from finance_tracker.schemas.income_entry import IncomeEntryRead
from finance_tracker.services.aggregation import (
    summarize_income_month,
    yearly_income_by_month,
    yearly_payouts_by_month,
)
from finance_tracker.utils.dates import month_name

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

RECENT_ENTRIES = 5


@router.get("", response_model=DashboardRead)
@router.get("/", response_model=DashboardRead)
def get_dashboard(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
    repository: RecordRepository = Depends(get_record_repository),
):
    """
    Resumen del mes (por defecto el actual) y series anuales de ingresos y egresos.
    """
    today = date.today()
    year = year or today.year
    month = month or today.month

    income = repository.fetch_income(year)
    payouts = repository.fetch_payouts(year)
    yearly_payouts = yearly_payouts_by_month(payouts, year)

    recent_entries = session.exec(
        select(IncomeEntry)
        .where(
            IncomeEntry.user_id == user_id,
            IncomeEntry.year == year,
            IncomeEntry.month == month,
        )
        .options(joinedload(IncomeEntry.source))
        .order_by(IncomeEntry.date.desc(), IncomeEntry.id.desc())
        .limit(RECENT_ENTRIES)
    ).all()

    return DashboardRead(
        year=year,
        month=month,
        month_name=month_name(month),
        income=summarize_income_month(income, year, month),
        current_month_payouts=yearly_payouts[month - 1].total_payouts,
        yearly_income=yearly_income_by_month(income, year),
        yearly_payouts=yearly_payouts,
        recent_entries=[IncomeEntryRead.model_validate(entry) for entry in recent_entries],
    )
