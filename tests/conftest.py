"""Shared pytest fixtures for the account transaction server tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from account_server.db import models
from account_server.infrastructure.database.session import configure_sqlite_transactions, init_db
from account_server.modules.accounts import Account, AccountStatus, AccountUser
from account_server.modules.transactions import Transaction, TransactionService

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)

OWNER_ID = 12
OTHER_USER_ID = 13
ACCOUNT_NUMBER = "1000000012"
OTHER_ACCOUNT_NUMBER = "1000000013"
UNREGISTERED_ACCOUNT_NUMBER = "1000000099"
INITIAL_BALANCE = 10_000


# --- in-memory stores -------------------------------------------------------


@dataclass
class InMemoryStore:
    users: dict[int, AccountUser] = field(default_factory=dict)
    accounts: dict[str, Account] = field(default_factory=dict)
    transactions: dict[str, Transaction] = field(default_factory=dict)
    locked_accounts: list[str] = field(default_factory=list)
    commits: int = 0
    rollbacks: int = 0

    def snapshot(self) -> tuple[dict, dict, dict]:
        return dict(self.users), dict(self.accounts), dict(self.transactions)

    def restore(self, state: tuple[dict, dict, dict]) -> None:
        self.users, self.accounts, self.transactions = state


class InMemoryAccountRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_account_number(self, account_number: str, *, for_update: bool = False) -> Account | None:
        if for_update:
            self._store.locked_accounts.append(account_number)
        return self._store.accounts.get(account_number)

    async def update_balance(self, account: Account, delta: int) -> Account | None:
        current = self._store.accounts[account.account_number]
        if current.balance + delta < 0:
            return None
        updated = replace(current, balance=current.balance + delta)
        self._store.accounts[account.account_number] = updated
        return updated


class InMemoryAccountUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: int) -> AccountUser | None:
        return self._store.users.get(user_id)


class InMemoryTransactionRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_transaction_id(self, transaction_id: str) -> Transaction | None:
        return self._store.transactions.get(transaction_id)

    async def save(self, transaction: Transaction) -> Transaction:
        self._store.transactions[transaction.transaction_id] = transaction
        return transaction


class InMemoryUnitOfWork:
    """Snapshot the store on entry and restore it if the block raises."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self.accounts = InMemoryAccountRepository(store)
        self.users = InMemoryAccountUserRepository(store)
        self.transactions = InMemoryTransactionRepository(store)

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._state = self._store.snapshot()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self._store.commits += 1
        else:
            self._store.restore(self._state)
            self._store.rollbacks += 1


@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    store.users[OWNER_ID] = AccountUser(id=OWNER_ID, name="Pobi")
    store.users[OTHER_USER_ID] = AccountUser(id=OTHER_USER_ID, name="Harry")
    store.accounts[ACCOUNT_NUMBER] = Account(
        id=1,
        account_user_id=OWNER_ID,
        account_number=ACCOUNT_NUMBER,
        balance=INITIAL_BALANCE,
    )
    store.accounts[OTHER_ACCOUNT_NUMBER] = Account(
        id=2,
        account_user_id=OTHER_USER_ID,
        account_number=OTHER_ACCOUNT_NUMBER,
        balance=5_000,
    )
    store.accounts[UNREGISTERED_ACCOUNT_NUMBER] = Account(
        id=3,
        account_user_id=OWNER_ID,
        account_number=UNREGISTERED_ACCOUNT_NUMBER,
        balance=INITIAL_BALANCE,
        status=AccountStatus.UNREGISTERED,
    )
    return store


@pytest.fixture
def service(store: InMemoryStore) -> TransactionService:
    return TransactionService(unit_of_work=lambda: InMemoryUnitOfWork(store), clock=lambda: NOW)


# --- SQLite-backed fixtures -------------------------------------------------


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


async def seed_accounts(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        owner = models.AccountUser(id=OWNER_ID, name="Pobi")
        other = models.AccountUser(id=OTHER_USER_ID, name="Harry")
        session.add_all([owner, other])
        session.add_all(
            [
                models.Account(
                    id=1,
                    account_user=owner,
                    account_number=ACCOUNT_NUMBER,
                    account_status=AccountStatus.IN_USE.value,
                    balance=INITIAL_BALANCE,
                ),
                models.Account(
                    id=2,
                    account_user=other,
                    account_number=OTHER_ACCOUNT_NUMBER,
                    account_status=AccountStatus.IN_USE.value,
                    balance=5_000,
                ),
                models.Account(
                    id=3,
                    account_user=owner,
                    account_number=UNREGISTERED_ACCOUNT_NUMBER,
                    account_status=AccountStatus.UNREGISTERED.value,
                    balance=INITIAL_BALANCE,
                ),
            ]
        )
        await session.commit()
    return factory


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return await seed_accounts(engine)


@pytest_asyncio.fixture
async def file_engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    # concurrent sessions need their own connections to a real database file
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}")
    configure_sqlite_transactions(engine)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def file_session_factory(file_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return await seed_accounts(file_engine)


@pytest.fixture
def sql_service(session_factory: async_sessionmaker[AsyncSession]) -> TransactionService:
    return TransactionService.with_session_factory(session_factory)


async def fetch_balance(factory: async_sessionmaker[AsyncSession], account_number: str) -> int:
    async with factory() as session:
        result = await session.execute(
            select(models.Account.balance).where(models.Account.account_number == account_number)
        )
        return result.scalar_one()


async def fetch_transactions(factory: async_sessionmaker[AsyncSession]) -> list[models.Transaction]:
    async with factory() as session:
        result = await session.execute(select(models.Transaction).order_by(models.Transaction.id))
        return list(result.scalars().all())
