"""Transaction related dependency providers."""

from account_server.core.container import get_container
from account_server.modules.transactions import TransactionService


def get_transaction_service() -> TransactionService:
    return get_container().transaction_service()


__all__ = [
    "get_transaction_service",
]
