"""Translate raised errors into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from account_server.modules.accounts.exceptions import AccountException, ErrorCode
from account_server.schemas import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TRANSACTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_ACCOUNT_UN_MATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ACCOUNT_ALREADY_UNREGISTERED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AMOUNT_EXCEED_BALANCE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TRANSACTION_ACCOUNT_UN_MATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANCEL_MUST_FULLY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TOO_OLD_ORDER_TO_CANCEL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INTERNAL_SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(error_code: ErrorCode, error_message: str) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, error_message=error_message)
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(error_code, status.HTTP_400_BAD_REQUEST),
        content=body.model_dump(mode="json"),
    )


async def handle_account_exception(request: Request, exc: AccountException) -> JSONResponse:
    logger.error("%s raised on %s %s", exc.error_code.value, request.method, request.url.path)
    return _error_response(exc.error_code, exc.error_message)


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return _error_response(
        ErrorCode.INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_SERVER_ERROR.description,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountException, handle_account_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
