"""Account domain exports"""

from .exceptions import AccountError, AccountException, ErrorCode
from .models import Account, AccountStatus, AccountUser
from .repository import AccountRepository, AccountUserRepository

__all__ = [
    "Account",
    "AccountError",
    "AccountException",
    "AccountRepository",
    "AccountStatus",
    "AccountUser",
    "AccountUserRepository",
    "ErrorCode",
]
