"""Domain models for accounts and their owners."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AccountStatus(str, Enum):
    IN_USE = "IN_USE"
    UNREGISTERED = "UNREGISTERED"


@dataclass(frozen=True, slots=True)
class AccountUser:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Account:
    id: int
    account_user_id: int
    account_number: str
    balance: int
    status: AccountStatus = AccountStatus.IN_USE
    registered_at: Optional[datetime] = None
    unregistered_at: Optional[datetime] = None

    def is_in_use(self) -> bool:
        return self.status == AccountStatus.IN_USE
