# finance_tracker/api/payout_categories.py

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlmodel import Session, select, func

from finance_tracker.core.security import get_current_user
from finance_tracker.database import get_session
from finance_tracker.models.payout import Payout
from finance_tracker.models.payout_category import PayoutCategory
from finance_tracker.schemas.payout_category import PayoutCategoryCreate, PayoutCategoryRead, PayoutCategoryUpdate
from finance_tracker.utils.ownership import get_owned_or_404

router = APIRouter(prefix="/payout-categories", tags=["payout_categories"])

NOT_FOUND = "Payout category not found"
NULLABLE = {"target_amount", "icon"}


@router.get("", response_model=List[PayoutCategoryRead])
@router.get("/", response_model=List[PayoutCategoryRead])
def list_payout_categories(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return session.exec(
        select(PayoutCategory)
        .where(PayoutCategory.user_id == user_id)
        .order_by(PayoutCategory.name)
    ).all()


@router.post("", response_model=PayoutCategoryRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PayoutCategoryRead, status_code=status.HTTP_201_CREATED)
def create_payout_category(
    category_data: PayoutCategoryCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    exists = session.exec(
        select(PayoutCategory).where(
            PayoutCategory.user_id == user_id,
            PayoutCategory.name == category_data.name,
        )
    ).first()
    if exists:
        raise HTTPException(status_code=400, detail="Payout category already exists")

    category = PayoutCategory(**category_data.model_dump(), user_id=user_id)
    session.add(category)
    session.commit()
    session.refresh(category)

    logger.info("Created payout category {} for user {}", category.id, user_id)
    return category


@router.get("/{category_id}", response_model=PayoutCategoryRead)
def get_payout_category(
    category_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return get_owned_or_404(session, PayoutCategory, category_id, user_id, NOT_FOUND)


@router.put("/{category_id}", response_model=PayoutCategoryRead)
def update_payout_category(
    category_id: int,
    category_data: PayoutCategoryUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    category = get_owned_or_404(session, PayoutCategory, category_id, user_id, NOT_FOUND)

    for field, value in category_data.model_dump(exclude_unset=True).items():
        if value is None and field not in NULLABLE:
            continue
        setattr(category, field, value)
    category.updated_at = datetime.now(timezone.utc)

    session.add(category)
    session.commit()
    session.refresh(category)

    logger.info("Updated payout category {}", category.id)
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payout_category(
    category_id: int,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    category = get_owned_or_404(session, PayoutCategory, category_id, user_id, NOT_FOUND)

    # 🚫 Bloquear si tiene egresos asociados
    payout_count = session.exec(
        select(func.count(Payout.id)).where(Payout.category_id == category_id)
    ).one()
    if payout_count:
        raise HTTPException(
            status_code=400,
            detail="Cannot delete a payout category with payouts.",
        )

    session.delete(category)
    session.commit()
    logger.info("Deleted payout category {}", category_id)
