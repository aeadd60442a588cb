from typing import Optional, Type, TypeVar
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.orm import joinedload
from sqlmodel import Session, SQLModel, select

ModelT = TypeVar("ModelT", bound=SQLModel)

def get_owned_or_404(
    session: Session,
    model: Type[ModelT],
    record_id: int,
    user_id: UUID,
    detail: str,
    load: Optional[object] = None,
) -> ModelT:
    query = select(model).where(model.id == record_id, model.user_id == user_id)
    if load is not None:
        query = query.options(joinedload(load))

    record = session.exec(query).first()
    if not record:
        raise HTTPException(status_code=404, detail=detail)
    return record

def ensure_owned(
    session: Session,
    model: Type[ModelT],
    record_id: int,
    user_id: UUID,
    detail: str,
) -> ModelT:
    """Como `get_owned_or_404` pero para referencias dentro de un payload (400)."""
    record = session.exec(
        select(model).where(model.id == record_id, model.user_id == user_id)
    ).first()
    if not record:
        raise HTTPException(status_code=400, detail=detail)
    return record
