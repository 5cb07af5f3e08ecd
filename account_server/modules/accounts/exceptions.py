"""Error codes and the tagged exception raised by account balance operations."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error identifiers paired with a human-readable description."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    USER_ACCOUNT_UN_MATCH = "USER_ACCOUNT_UN_MATCH"
    ACCOUNT_ALREADY_UNREGISTERED = "ACCOUNT_ALREADY_UNREGISTERED"
    AMOUNT_EXCEED_BALANCE = "AMOUNT_EXCEED_BALANCE"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    TRANSACTION_ACCOUNT_UN_MATCH = "TRANSACTION_ACCOUNT_UN_MATCH"
    CANCEL_MUST_FULLY = "CANCEL_MUST_FULLY"
    TOO_OLD_ORDER_TO_CANCEL = "TOO_OLD_ORDER_TO_CANCEL"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.USER_NOT_FOUND: "User does not exist.",
    ErrorCode.ACCOUNT_NOT_FOUND: "Account does not exist.",
    ErrorCode.USER_ACCOUNT_UN_MATCH: "User and account owner do not match.",
    ErrorCode.ACCOUNT_ALREADY_UNREGISTERED: "Account is already unregistered.",
    ErrorCode.AMOUNT_EXCEED_BALANCE: "Transaction amount exceeds the account balance.",
    ErrorCode.TRANSACTION_NOT_FOUND: "Transaction does not exist.",
    ErrorCode.TRANSACTION_ACCOUNT_UN_MATCH: "Transaction does not belong to this account.",
    ErrorCode.CANCEL_MUST_FULLY: "Partial cancellation is not allowed.",
    ErrorCode.TOO_OLD_ORDER_TO_CANCEL: "Transactions older than one year cannot be cancelled.",
    ErrorCode.INTERNAL_SERVER_ERROR: "An internal server error occurred.",
}


class AccountError(Exception):
    """Base class for account domain errors."""


class AccountException(AccountError):
    """Raised when an account balance operation is rejected."""

    def __init__(self, error_code: ErrorCode, error_message: str | None = None) -> None:
        self.error_code = error_code
        self.error_message = error_message or error_code.description
        super().__init__(self.error_message)

    def __repr__(self) -> str:
        return f"AccountException(error_code={self.error_code.value!r})"
