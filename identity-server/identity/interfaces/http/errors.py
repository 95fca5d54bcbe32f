"""Translate account domain errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from identity.modules.accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountError,
    AccountNotFoundError,
    CredentialValidationError,
    InvalidCredentialsError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"

# Checked in order; the first matching class wins.
_STATUS_BY_ERROR: tuple[tuple[type[AccountError], int], ...] = (
    (CredentialValidationError, status.HTTP_400_BAD_REQUEST),
    (AccountAlreadyExistsError, status.HTTP_409_CONFLICT),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AccountNotFoundError, status.HTTP_404_NOT_FOUND),
)


def status_for(exc: AccountError) -> int:
    for error_cls, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        if isinstance(exc, StorageUnavailableError):
            logger.error("%s %s failed: account storage unavailable", request.method, request.url.path)
        else:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error(status_code, SERVER_ERROR_MESSAGE)
    return _error(status_code, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = ["register_exception_handlers", "status_for", "SERVER_ERROR_MESSAGE"]
