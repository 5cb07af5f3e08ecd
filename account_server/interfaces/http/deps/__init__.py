"""Reusable FastAPI dependencies."""

from .transactions import get_transaction_service

__all__ = [
    "get_transaction_service",
]
