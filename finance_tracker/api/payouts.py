# finance_tracker/api/payouts.py

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from loguru import logger
from sqlalchemy.orm import joinedload
from sqlmodel import Session, select

from finance_tracker.core.security import get_current_user
from finance_tracker.database import get_session
from finance_tracker.models.payout import Payout
from finance_tracker.models.payout_category import PayoutCategory
from finance_tracker.repositories.records import RecordRepository, get_record_repository
from finance_tracker.schemas.dashboard import CategoryPayoutSummary, YearlyPayoutPoint
from finance_tracker.schemas.payout import PayoutCreate, PayoutRead, PayoutUpdate
from finance_tracker.services.aggregation import payouts_by_category, yearly_payouts_by_month
from finance_tracker.utils.dates import period_fields
from finance_tracker.utils.ownership import ensure_owned, get_owned_or_404

router = APIRouter(prefix="/payouts", tags=["payouts"])

NOT_FOUND = "Payout not found"
INVALID_CATEGORY = "Invalid payout category"
NULLABLE = {"notes", "due_date"}


@router.get("", response_model=List[PayoutRead])
@router.get("/", response_model=List[PayoutRead])
def list_payouts(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    query = (
        select(Payout)
        .where(Payout.user_id == user_id)
        .options(joinedload(Payout.category))
        .order_by(Payout.date.desc(), Payout.id.desc())
    )
    if year is not None:
        query = query.where(Payout.year == year)
    if month is not None:
        query = query.where(Payout.month == month)

    return session.exec(query).all()


@router.get("/summary/by-category", response_model=List[CategoryPayoutSummary])
def get_payouts_by_category(
    year: int = Query(...),
    month: int = Query(..., ge=1, le=12),
    repository: RecordRepository = Depends(get_record_repository),
):
    return payouts_by_category(repository.fetch_payouts(year, month))


@router.get("/summary/yearly", response_model=List[YearlyPayoutPoint])
def get_yearly_payouts(
    year: int = Query(...),
    repository: RecordRepository = Depends(get_record_repository),
):
    return yearly_payouts_by_month(repository.fetch_payouts(year), year)


@router.post("", response_model=PayoutRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PayoutRead, status_code=status.HTTP_201_CREATED)
def create_payout(
    payout_data: PayoutCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    ensure_owned(session, PayoutCategory, payout_data.category_id, user_id, INVALID_CATEGORY)

    fields = period_fields(payout_data.date)
    payout = Payout(
        **payout_data.model_dump(),
        month=fields["month"],
        year=fields["year"],
        user_id=user_id,
    )
    session.add(payout)
    session.commit()
    session.refresh(payout)

    logger.info("Created payout {} ({}/{})", payout.id, payout.month, payout.year)
    return payout


@router.get("/{payout_id}", response_model=PayoutRead)
def get_payout(
    payout_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return get_owned_or_404(session, Payout, payout_id, user_id, NOT_FOUND, load=Payout.category)


@router.put("/{payout_id}", response_model=PayoutRead)
def update_payout(
    payout_id: int,
    payout_data: PayoutUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    payout = get_owned_or_404(session, Payout, payout_id, user_id, NOT_FOUND)

    changes = {
        field: value
        for field, value in payout_data.model_dump(exclude_unset=True).items()
        if value is not None or field in NULLABLE
    }
    if "category_id" in changes:
        ensure_owned(session, PayoutCategory, changes["category_id"], user_id, INVALID_CATEGORY)
    if "date" in changes:
        fields = period_fields(changes["date"])
        changes["month"] = fields["month"]
        changes["year"] = fields["year"]

    for field, value in changes.items():
        setattr(payout, field, value)
    payout.updated_at = datetime.now(timezone.utc)

    session.add(payout)
    session.commit()
    session.refresh(payout)

    logger.info("Updated payout {}", payout.id)
    return payout


@router.delete("/{payout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payout(
    payout_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    payout = get_owned_or_404(session, Payout, payout_id, user_id, NOT_FOUND)
    session.delete(payout)
    session.commit()
    logger.info("Deleted payout {}", payout_id)
