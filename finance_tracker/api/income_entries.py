# finance_tracker/api/income_entries.py

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from loguru import logger
from sqlalchemy.orm import joinedload
from sqlmodel import Session, select

from finance_tracker.core.security import get_current_user
from finance_tracker.database import get_session
from finance_tracker.models.income_entry import IncomeEntry
from finance_tracker.models.income_source import IncomeSource
from finance_tracker.schemas.income_entry import IncomeEntryCreate, IncomeEntryRead, IncomeEntryUpdate
from finance_tracker.utils.dates import period_fields
from finance_tracker.utils.ownership import ensure_owned, get_owned_or_404

router = APIRouter(prefix="/income-entries", tags=["income_entries"])

NOT_FOUND = "Income entry not found"
INVALID_SOURCE = "Invalid income source"
NULLABLE = {"notes"}


@router.get("", response_model=List[IncomeEntryRead])
@router.get("/", response_model=List[IncomeEntryRead])
def list_income_entries(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Ingresos del usuario, del más reciente al más antiguo, con su fuente."""
    query = (
        select(IncomeEntry)
        .where(IncomeEntry.user_id == user_id)
        .options(joinedload(IncomeEntry.source))
        .order_by(IncomeEntry.date.desc(), IncomeEntry.id.desc())
    )
    if year is not None:
        query = query.where(IncomeEntry.year == year)
    if month is not None:
        query = query.where(IncomeEntry.month == month)

    return session.exec(query).all()


@router.post("", response_model=IncomeEntryRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=IncomeEntryRead, status_code=status.HTTP_201_CREATED)
def create_income_entry(
    entry_data: IncomeEntryCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    ensure_owned(session, IncomeSource, entry_data.source_id, user_id, INVALID_SOURCE)

    data = entry_data.model_dump(exclude={"week"})
    data.update(period_fields(entry_data.date, entry_data.week))

    entry = IncomeEntry(**data, user_id=user_id)
    session.add(entry)
    session.commit()
    session.refresh(entry)

    logger.info("Created income entry {} ({}/{} week {})", entry.id, entry.month, entry.year, entry.week)
    return entry


@router.get("/{entry_id}", response_model=IncomeEntryRead)
def get_income_entry(
    entry_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return get_owned_or_404(session, IncomeEntry, entry_id, user_id, NOT_FOUND, load=IncomeEntry.source)


@router.put("/{entry_id}", response_model=IncomeEntryRead)
def update_income_entry(
    entry_id: int,
    entry_data: IncomeEntryUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    entry = get_owned_or_404(session, IncomeEntry, entry_id, user_id, NOT_FOUND)

    changes = {
        field: value
        for field, value in entry_data.model_dump(exclude_unset=True).items()
        if value is not None or field in NULLABLE
    }
    if "source_id" in changes:
        ensure_owned(session, IncomeSource, changes["source_id"], user_id, INVALID_SOURCE)

    # Mes y año siempre salen de la fecha; la semana también salvo que venga explícita
    if "date" in changes:
        changes.update(period_fields(changes["date"], changes.get("week")))

    for field, value in changes.items():
        setattr(entry, field, value)
    entry.updated_at = datetime.now(timezone.utc)

    session.add(entry)
    session.commit()
    session.refresh(entry)

    logger.info("Updated income entry {}", entry.id)
    return entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_income_entry(
    entry_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    entry = get_owned_or_404(session, IncomeEntry, entry_id, user_id, NOT_FOUND)
    session.delete(entry)
    session.commit()
    logger.info("Deleted income entry {}", entry_id)
