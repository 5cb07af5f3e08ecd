"""Domain models for balance transactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TransactionType(str, Enum):
    USE = "USE"
    CANCEL = "CANCEL"


class TransactionResultType(str, Enum):
    SUCCESS = "S"
    FAIL = "F"


@dataclass(frozen=True, slots=True)
class Transaction:
    transaction_id: str
    transaction_type: TransactionType
    transaction_result_type: TransactionResultType
    account_id: int
    account_number: str
    amount: int
    balance_snapshot: int
    transacted_at: datetime


@dataclass(frozen=True, slots=True)
class TransactionResult:
    """Data view of a persisted transaction handed back to callers."""

    account_number: str
    transaction_type: TransactionType
    transaction_result: TransactionResultType
    transaction_id: str
    amount: int
    transacted_at: datetime
    balance_snapshot: int

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResult":
        return cls(
            account_number=transaction.account_number,
            transaction_type=transaction.transaction_type,
            transaction_result=transaction.transaction_result_type,
            transaction_id=transaction.transaction_id,
            amount=transaction.amount,
            transacted_at=transaction.transacted_at,
            balance_snapshot=transaction.balance_snapshot,
        )
