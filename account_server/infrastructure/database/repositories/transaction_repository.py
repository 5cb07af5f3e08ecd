"""SQLAlchemy implementation of the transaction repository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from account_server.db.models import Transaction as TransactionModel
from account_server.modules.transactions.models import (
    Transaction,
    TransactionResultType,
    TransactionType,
)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_transaction_id(self, transaction_id: str) -> Transaction | None:
        stmt = (
            select(TransactionModel)
            .options(joinedload(TransactionModel.account))
            .where(TransactionModel.transaction_id == transaction_id)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        if model is None:
            return None
        return self._to_domain(model, model.account.account_number)

    async def save(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(
            transaction_id=transaction.transaction_id,
            transaction_type=transaction.transaction_type.value,
            transaction_result_type=transaction.transaction_result_type.value,
            account_id=transaction.account_id,
            amount=transaction.amount,
            balance_snapshot=transaction.balance_snapshot,
            transacted_at=transaction.transacted_at,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model, transaction.account_number)

    @staticmethod
    def _to_domain(model: TransactionModel, account_number: str) -> Transaction:
        return Transaction(
            transaction_id=model.transaction_id,
            transaction_type=TransactionType(model.transaction_type),
            transaction_result_type=TransactionResultType(model.transaction_result_type),
            account_id=model.account_id,
            account_number=account_number,
            amount=model.amount,
            balance_snapshot=model.balance_snapshot,
            transacted_at=_as_utc(model.transacted_at),
        )
