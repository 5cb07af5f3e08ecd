"""Transaction domain exports"""

from .models import Transaction, TransactionResult, TransactionResultType, TransactionType
from .repository import TransactionRepository, TransactionUnitOfWork
from .service import TransactionService

__all__ = [
    "Transaction",
    "TransactionRepository",
    "TransactionResult",
    "TransactionResultType",
    "TransactionService",
    "TransactionType",
    "TransactionUnitOfWork",
]
