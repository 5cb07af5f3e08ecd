"""SQLAlchemy implementations of the account and account user repositories."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from account_server.db.models import Account as AccountModel, AccountUser as AccountUserModel
from account_server.modules.accounts.models import Account, AccountStatus, AccountUser
from account_server.modules.accounts.repository import AccountRepository, AccountUserRepository


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_account_number(self, account_number: str, *, for_update: bool = False) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.account_number == account_number)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model)

    async def update_balance(self, account: Account, delta: int) -> Account | None:
        """Apply ``delta`` to the stored balance unless it would go negative.

        The change is relative to the row as it is at write time, not to
        ``account.balance``, so a concurrent writer cannot be overwritten.
        """
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account.id, AccountModel.balance + delta >= 0)
            .values(balance=AccountModel.balance + delta)
            .execution_options(synchronize_session="fetch")
            .returning(AccountModel.balance)
        )
        result = await self._session.execute(stmt)
        balance = result.scalar_one_or_none()
        if balance is None:
            return None
        return replace(account, balance=balance)

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            account_user_id=model.account_user_id,
            account_number=model.account_number,
            balance=model.balance,
            status=AccountStatus(model.account_status),
            registered_at=model.registered_at,
            unregistered_at=model.unregistered_at,
        )


class SqlAccountUserRepository(AccountUserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> AccountUser | None:
        stmt = select(AccountUserModel).where(AccountUserModel.id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return AccountUser(id=model.id, name=model.name)
