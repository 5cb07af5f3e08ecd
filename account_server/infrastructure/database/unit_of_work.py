"""Session-scoped unit of work for transaction operations."""

from __future__ import annotations

from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from account_server.infrastructure.database.repositories import (
    SqlAccountRepository,
    SqlAccountUserRepository,
    SqlTransactionRepository,
)


class SqlUnitOfWork:
    """Open one session, expose the repositories bound to it, and commit on a
    clean exit or roll back on any exception.

    Instances are single use; build a new one per operation.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of work has not been entered")
        return self._session

    async def __aenter__(self) -> "SqlUnitOfWork":
        if self._session is not None:
            raise RuntimeError("Unit of work is already active")
        self._session = self._session_factory()
        self.accounts = SqlAccountRepository(self._session)
        self.users = SqlAccountUserRepository(self._session)
        self.transactions = SqlTransactionRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if exc_type is None:
                await session.commit()
            else:
                await session.rollback()
        finally:
            await session.close()
