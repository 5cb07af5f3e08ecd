"""Balance use / cancel transaction service.

Every public operation runs inside exactly one unit of work: the reads,
the balance update and the transaction insert are committed together or
not at all. Failed attempts are recorded by the ``save_failed_*`` methods,
which the caller invokes in a separate unit of work after catching an
:class:`AccountException`.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from account_server.modules.accounts.exceptions import AccountException, ErrorCode
from account_server.modules.accounts.models import Account, AccountUser

from .models import Transaction, TransactionResult, TransactionResultType, TransactionType
from .repository import TransactionUnitOfWork

logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], TransactionUnitOfWork]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_transaction_id() -> str:
    return uuid.uuid4().hex


def years_before(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        # Feb 29 has no counterpart in a non-leap year
        return moment.replace(year=moment.year - years, day=28)


def validate_use_balance(user: AccountUser, account: Account, amount: int) -> None:
    if user.id != account.account_user_id:
        raise AccountException(ErrorCode.USER_ACCOUNT_UN_MATCH)
    if not account.is_in_use():
        raise AccountException(ErrorCode.ACCOUNT_ALREADY_UNREGISTERED)
    if account.balance < amount:
        raise AccountException(ErrorCode.AMOUNT_EXCEED_BALANCE)


def validate_cancel_balance(
    transaction: Transaction,
    account: Account,
    amount: int,
    *,
    now: datetime,
    window_years: int = 1,
) -> None:
    """Check that ``transaction`` can be reversed by a cancel of ``amount``.

    Only the account, the full amount and the age are checked. The record is
    not required to be a successful ``USE``, and earlier cancels are not
    looked up, so cancelling the same transaction twice credits it twice.
    """
    if transaction.account_id != account.id:
        raise AccountException(ErrorCode.TRANSACTION_ACCOUNT_UN_MATCH)
    if transaction.amount != amount:
        raise AccountException(ErrorCode.CANCEL_MUST_FULLY)
    if transaction.transacted_at < years_before(now, window_years):
        raise AccountException(ErrorCode.TOO_OLD_ORDER_TO_CANCEL)


def build_transaction(
    transaction_type: TransactionType,
    result_type: TransactionResultType,
    amount: int,
    account: Account,
    *,
    transacted_at: datetime,
) -> Transaction:
    """Build a new record; ``account`` must already reflect any balance change."""
    return Transaction(
        transaction_id=generate_transaction_id(),
        transaction_type=transaction_type,
        transaction_result_type=result_type,
        account_id=account.id,
        account_number=account.account_number,
        amount=amount,
        balance_snapshot=account.balance,
        transacted_at=transacted_at,
    )


@dataclass(slots=True)
class TransactionService:
    unit_of_work: UnitOfWorkFactory
    cancel_window_years: int = 1
    clock: Callable[[], datetime] = utcnow

    @classmethod
    def with_session_factory(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        cancel_window_years: int = 1,
    ) -> "TransactionService":
        # imported lazily: the SQL repositories import this package's models
        from account_server.infrastructure.database.unit_of_work import SqlUnitOfWork

        return cls(
            unit_of_work=lambda: SqlUnitOfWork(session_factory),
            cancel_window_years=cancel_window_years,
        )

    async def use_balance(self, user_id: int, account_number: str, amount: int) -> TransactionResult:
        async with self.unit_of_work() as uow:
            user = await uow.users.find_by_id(user_id)
            if user is None:
                raise AccountException(ErrorCode.USER_NOT_FOUND)
            account = await self._get_account(uow, account_number, for_update=True)

            validate_use_balance(user, account, amount)

            account = await self._update_balance(uow, account, -amount)
            transaction = await self._save_transaction(
                uow, TransactionType.USE, TransactionResultType.SUCCESS, amount, account
            )

        logger.info(
            "Used %s from account %s, balance now %s (transaction %s)",
            amount,
            account_number,
            account.balance,
            transaction.transaction_id,
        )
        return TransactionResult.from_transaction(transaction)

    async def save_failed_use_transaction(self, account_number: str, amount: int) -> None:
        await self._save_failed_transaction(TransactionType.USE, account_number, amount)

    async def cancel_balance(self, transaction_id: str, account_number: str, amount: int) -> TransactionResult:
        async with self.unit_of_work() as uow:
            original = await uow.transactions.find_by_transaction_id(transaction_id)
            if original is None:
                raise AccountException(ErrorCode.TRANSACTION_NOT_FOUND)
            account = await self._get_account(uow, account_number, for_update=True)

            validate_cancel_balance(
                original,
                account,
                amount,
                now=self.clock(),
                window_years=self.cancel_window_years,
            )

            account = await self._update_balance(uow, account, amount)
            transaction = await self._save_transaction(
                uow, TransactionType.CANCEL, TransactionResultType.SUCCESS, amount, account
            )

        logger.info(
            "Cancelled transaction %s on account %s, balance now %s (transaction %s)",
            transaction_id,
            account_number,
            account.balance,
            transaction.transaction_id,
        )
        return TransactionResult.from_transaction(transaction)

    async def save_failed_cancel_transaction(self, account_number: str, amount: int) -> None:
        await self._save_failed_transaction(TransactionType.CANCEL, account_number, amount)

    async def query_transaction(self, transaction_id: str) -> TransactionResult:
        async with self.unit_of_work() as uow:
            transaction = await uow.transactions.find_by_transaction_id(transaction_id)
            if transaction is None:
                raise AccountException(ErrorCode.TRANSACTION_NOT_FOUND)
        return TransactionResult.from_transaction(transaction)

    async def _save_failed_transaction(
        self,
        transaction_type: TransactionType,
        account_number: str,
        amount: int,
    ) -> None:
        async with self.unit_of_work() as uow:
            account = await self._get_account(uow, account_number)
            transaction = await self._save_transaction(
                uow, transaction_type, TransactionResultType.FAIL, amount, account
            )
        logger.info(
            "Recorded failed %s of %s on account %s (transaction %s)",
            transaction_type.value,
            amount,
            account_number,
            transaction.transaction_id,
        )

    @staticmethod
    async def _get_account(
        uow: TransactionUnitOfWork,
        account_number: str,
        *,
        for_update: bool = False,
    ) -> Account:
        account = await uow.accounts.find_by_account_number(account_number, for_update=for_update)
        if account is None:
            raise AccountException(ErrorCode.ACCOUNT_NOT_FOUND)
        return account

    @staticmethod
    async def _update_balance(uow: TransactionUnitOfWork, account: Account, delta: int) -> Account:
        updated = await uow.accounts.update_balance(account, delta)
        if updated is None:
            # drained by another transaction since the balance was validated
            raise AccountException(ErrorCode.AMOUNT_EXCEED_BALANCE)
        return updated

    async def _save_transaction(
        self,
        uow: TransactionUnitOfWork,
        transaction_type: TransactionType,
        result_type: TransactionResultType,
        amount: int,
        account: Account,
    ) -> Transaction:
        transaction = build_transaction(
            transaction_type,
            result_type,
            amount,
            account,
            transacted_at=self.clock(),
        )
        return await uow.transactions.save(transaction)
