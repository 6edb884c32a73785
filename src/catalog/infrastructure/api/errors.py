"""Mapping of failures to HTTP responses.

Every failure leaves the API as ``{"error": message}``. Validation
failures surface their message with 400, unknown ids on update/delete
use the configured not-found status, and anything else collapses to
an opaque 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from catalog.infrastructure.config import Settings

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred"


def error_status(error: DomainException, settings: Settings) -> int:
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, EntityNotFoundError):
        return settings.not_found_status
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(error: DomainException, settings: Settings) -> JSONResponse:
    status_code = error_status(error, settings)
    message = str(error) if status_code < 500 else GENERIC_ERROR_MESSAGE
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_request_error(exc: RequestValidationError) -> str:
    """Render the first pydantic error as 'field: message'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _describe_request_error(exc)},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
