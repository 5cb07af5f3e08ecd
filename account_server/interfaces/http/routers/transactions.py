"""Balance use, use cancellation and transaction lookup endpoints."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends

from account_server.interfaces.http.deps import get_transaction_service
from account_server.modules.accounts.exceptions import AccountException
from account_server.modules.transactions import TransactionService
from account_server.schemas import (
    CancelBalanceRequest,
    ErrorResponse,
    QueryTransactionResponse,
    TransactionResponse,
    UseBalanceRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


async def _record_failure(
    record: Callable[[str, int], Awaitable[None]],
    account_number: str,
    amount: int,
) -> None:
    # The original error is what the client sees; a failure here is only logged.
    try:
        await record(account_number, amount)
    except AccountException as exc:
        logger.error(
            "Could not record failed transaction for account %s: %s",
            account_number,
            exc.error_code.value,
        )


@router.post("/use", response_model=TransactionResponse, responses=ERROR_RESPONSES, summary="Use account balance")
async def use_balance(
    payload: UseBalanceRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    try:
        result = await service.use_balance(payload.user_id, payload.account_number, payload.amount)
    except AccountException as exc:
        logger.error("Failed to use balance: %s", exc.error_code.value)
        await _record_failure(service.save_failed_use_transaction, payload.account_number, payload.amount)
        raise
    return TransactionResponse.model_validate(result)


@router.post("/cancel", response_model=TransactionResponse, responses=ERROR_RESPONSES, summary="Cancel a balance use")
async def cancel_balance(
    payload: CancelBalanceRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    try:
        result = await service.cancel_balance(payload.transaction_id, payload.account_number, payload.amount)
    except AccountException as exc:
        logger.error("Failed to cancel balance: %s", exc.error_code.value)
        await _record_failure(service.save_failed_cancel_transaction, payload.account_number, payload.amount)
        raise
    return TransactionResponse.model_validate(result)


@router.get(
    "/{transaction_id}",
    response_model=QueryTransactionResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Query a transaction",
)
async def query_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
) -> QueryTransactionResponse:
    result = await service.query_transaction(transaction_id)
    return QueryTransactionResponse.model_validate(result)
