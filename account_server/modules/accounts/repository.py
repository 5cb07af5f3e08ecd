"""Repository protocols for accounts and account users."""

from __future__ import annotations

from typing import Protocol

from .models import Account, AccountUser


class AccountRepository(Protocol):
    """Point lookups and balance persistence for accounts."""

    async def find_by_account_number(self, account_number: str, *, for_update: bool = False) -> Account | None:
        ...

    async def update_balance(self, account: Account, delta: int) -> Account | None:
        """Add ``delta`` to the stored balance; ``None`` if it would go negative."""
        ...


class AccountUserRepository(Protocol):
    async def find_by_id(self, user_id: int) -> AccountUser | None:
        ...
