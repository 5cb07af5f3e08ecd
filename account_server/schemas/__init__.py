"""Pydantic schemas used across the project."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from account_server.modules.accounts.exceptions import ErrorCode
from account_server.modules.transactions.models import TransactionResultType, TransactionType

ACCOUNT_NUMBER_LENGTH = 10
MIN_TRANSACTION_AMOUNT = 10
MAX_TRANSACTION_AMOUNT = 1_000_000_000


class UseBalanceRequest(BaseModel):
    user_id: int = Field(..., ge=1)
    account_number: str = Field(..., min_length=ACCOUNT_NUMBER_LENGTH, max_length=ACCOUNT_NUMBER_LENGTH)
    amount: int = Field(..., ge=MIN_TRANSACTION_AMOUNT, le=MAX_TRANSACTION_AMOUNT)


class CancelBalanceRequest(BaseModel):
    transaction_id: str = Field(..., min_length=1, pattern=r"\S")
    account_number: str = Field(..., min_length=ACCOUNT_NUMBER_LENGTH, max_length=ACCOUNT_NUMBER_LENGTH)
    amount: int = Field(..., ge=MIN_TRANSACTION_AMOUNT, le=MAX_TRANSACTION_AMOUNT)


class TransactionResponse(BaseModel):
    account_number: str
    transaction_result: TransactionResultType
    transaction_id: str
    amount: int
    transacted_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QueryTransactionResponse(TransactionResponse):
    transaction_type: TransactionType


class ErrorResponse(BaseModel):
    error_code: ErrorCode
    error_message: str
