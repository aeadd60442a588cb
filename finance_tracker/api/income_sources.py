# finance_tracker/api/income_sources.py

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlmodel import Session, select, func

from finance_tracker.core.security import get_current_user
from finance_tracker.database import get_session
from finance_tracker.models.income_entry import IncomeEntry
from finance_tracker.models.income_source import IncomeSource
from finance_tracker.schemas.income_source import IncomeSourceCreate, IncomeSourceRead, IncomeSourceUpdate
from finance_tracker.utils.ownership import get_owned_or_404

router = APIRouter(prefix="/income-sources", tags=["income_sources"])

NOT_FOUND = "Income source not found"


@router.get("", response_model=List[IncomeSourceRead])
@router.get("/", response_model=List[IncomeSourceRead])
def list_income_sources(
    active_only: bool = Query(False),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    query = select(IncomeSource).where(IncomeSource.user_id == user_id)
    if active_only:
        query = query.where(IncomeSource.is_active == True)
    return session.exec(query.order_by(IncomeSource.name)).all()


@router.post("", response_model=IncomeSourceRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=IncomeSourceRead, status_code=status.HTTP_201_CREATED)
def create_income_source(
    source_data: IncomeSourceCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    source = IncomeSource(**source_data.model_dump(), user_id=user_id)
    session.add(source)
    session.commit()
    session.refresh(source)

    logger.info("Created income source {} for user {}", source.id, user_id)
    return source


@router.get("/{source_id}", response_model=IncomeSourceRead)
def get_income_source(
    source_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return get_owned_or_404(session, IncomeSource, source_id, user_id, NOT_FOUND)


@router.put("/{source_id}", response_model=IncomeSourceRead)
def update_income_source(
    source_id: int,
    source_data: IncomeSourceUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    source = get_owned_or_404(session, IncomeSource, source_id, user_id, NOT_FOUND)

    for field, value in source_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(source, field, value)
    source.updated_at = datetime.now(timezone.utc)

    session.add(source)
    session.commit()
    session.refresh(source)

    logger.info("Updated income source {}", source.id)
    return source


@router.delete("/{source_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_income_source(
    source_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Borra una fuente de ingreso.
    - 🚫 No permite borrarla si tiene ingresos asociados (se puede desactivar con is_active).
    """
    source = get_owned_or_404(session, IncomeSource, source_id, user_id, NOT_FOUND)

    entry_count = session.exec(
        select(func.count(IncomeEntry.id)).where(IncomeEntry.source_id == source_id)
    ).one()
    if entry_count:
        raise HTTPException(
            status_code=400,
            detail="Cannot delete an income source with income entries. Deactivate it instead.",
        )

    session.delete(source)
    session.commit()
    logger.info("Deleted income source {}", source_id)
