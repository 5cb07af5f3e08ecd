"""Domain modules and their public exports."""

from . import accounts, transactions

__all__ = [
    "accounts",
    "transactions",
]
