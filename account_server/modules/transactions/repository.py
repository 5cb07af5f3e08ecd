"""Repository and unit-of-work protocols for transaction operations."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

from account_server.modules.accounts.repository import AccountRepository, AccountUserRepository

from .models import Transaction


class TransactionRepository(Protocol):
    async def find_by_transaction_id(self, transaction_id: str) -> Transaction | None:
        ...

    async def save(self, transaction: Transaction) -> Transaction:
        ...


class TransactionUnitOfWork(Protocol):
    """Atomic scope exposing every store a transaction operation touches.

    Leaving the ``async with`` block normally commits; leaving it with an
    exception rolls back everything written inside it.
    """

    accounts: AccountRepository
    users: AccountUserRepository
    transactions: TransactionRepository

    async def __aenter__(self) -> "TransactionUnitOfWork":
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...
