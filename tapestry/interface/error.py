"""Interface layer error handling.

Failures of the hosted services (identity, storage, database) are reported as
502 with ``retryable: true`` so the client can show a dismissible error with a
retry button.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from tapestry.adapter.error import ProviderError


def _retryable(detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": detail, "retryable": True},
    )


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    """Translate a hosted-service failure into a retryable 502."""
    logfire.error(
        "Provider error", path=request.url.path, method=request.method, error=str(exc)
    )
    return _retryable(str(exc))


async def database_error_handler(
    request: Request, exc: OperationalError
) -> JSONResponse:
    """Translate a lost or refused database connection into a retryable 502."""
    logfire.error(
        "Database unavailable",
        path=request.url.path,
        method=request.method,
        error=str(exc.orig),
    )
    return _retryable("Database unavailable, please try again")


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers shared by all routes."""
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.add_exception_handler(OperationalError, database_error_handler)
