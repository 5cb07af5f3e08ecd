"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository, SqlAccountUserRepository
from .transaction_repository import SqlTransactionRepository

__all__ = [
    "SqlAccountRepository",
    "SqlAccountUserRepository",
    "SqlTransactionRepository",
]
