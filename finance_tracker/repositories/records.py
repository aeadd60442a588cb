# finance_tracker/repositories/records.py

from typing import List, Optional, Protocol
from uuid import UUID

from fastapi import Depends
from loguru import logger
from sqlalchemy.orm import joinedload
from sqlmodel import Session, select

from finance_tracker.core.security import get_current_user
from finance_tracker.database import get_session
from finance_tracker.models.income_entry import IncomeEntry
from finance_tracker.models.payout import Payout
from finance_tracker.schemas.records import IncomeRecord, PayoutRecord


class RecordRepository(Protocol):
    def fetch_income(self, year: int, month: Optional[int] = None) -> List[IncomeRecord]:
        ...

    def fetch_payouts(self, year: int, month: Optional[int] = None) -> List[PayoutRecord]:
        ...


class SqlRecordRepository:
    """Lee ingresos y egresos de un usuario y los entrega como registros planos."""

    def __init__(self, session: Session, user_id: UUID):
        self.session = session
        self.user_id = user_id

    def fetch_income(self, year: int, month: Optional[int] = None) -> List[IncomeRecord]:
        query = (
            select(IncomeEntry)
            .where(IncomeEntry.user_id == self.user_id)
            .where(IncomeEntry.year == year)
            .options(joinedload(IncomeEntry.source))
        )
        if month is not None:
            query = query.where(IncomeEntry.month == month)

        rows = self.session.exec(query).all()
        logger.debug("Fetched {} income entries for user={} year={} month={}", len(rows), self.user_id, year, month)
        return [IncomeRecord.model_validate(row) for row in rows]

    def fetch_payouts(self, year: int, month: Optional[int] = None) -> List[PayoutRecord]:
        query = (
            select(Payout)
            .where(Payout.user_id == self.user_id)
            .where(Payout.year == year)
            .options(joinedload(Payout.category))
        )
        if month is not None:
            query = query.where(Payout.month == month)

        rows = self.session.exec(query).all()
        logger.debug("Fetched {} payouts for user={} year={} month={}", len(rows), self.user_id, year, month)
        return [PayoutRecord.model_validate(row) for row in rows]


def get_record_repository(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
) -> RecordRepository:
    return SqlRecordRepository(session, user_id)
