"""
Error handling for the FastAPI application.
Every error leaves the service in the same JSON envelope:
timestamp, status, error, message and per-field messages.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, Optional

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from taskboard.domain.models.base import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    BusinessRuleViolation,
    WebhookDeliveryError,
    StoreUnavailableError
)

logger = logging.getLogger(__name__)


GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
VALIDATION_ERROR_MESSAGE = "Validation errors"


def error_body(
    status_code: int,
    message: str,
    messages: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Build the error envelope for a status code."""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "messages": messages
    }


def error_response(
    status_code: int,
    message: str,
    messages: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, message, messages)
    )


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception."""
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (DuplicateEntityError, BusinessRuleViolation)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, WebhookDeliveryError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_name(loc) -> str:
    # ("body", "email") -> "email"; a bare ("body",) keeps its only part
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) if parts else str(loc[-1])


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages: Dict[str, str] = {}
    for error in exc.errors():
        messages.setdefault(_field_name(error.get("loc", ("request",))), error.get("msg", "invalid value"))

    logger.warning(f"Validation failed on {request.method} {request.url.path}: {messages}")
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR_MESSAGE, messages)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)

    if isinstance(exc, ValidationError):
        messages = {exc.field: exc.message} if exc.field else None
        logger.warning(f"Domain validation failed on {request.url.path}: {exc.message}")
        return error_response(status_code, VALIDATION_ERROR_MESSAGE, messages)

    if status_code >= 500:
        logger.error(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc
        )
        message = exc.message if isinstance(exc, WebhookDeliveryError) else GENERIC_ERROR_MESSAGE
        return error_response(status_code, message)

    logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return error_response(status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == HTTPStatus.NOT_FOUND.phrase:
        message = f"The path {request.url.path} was not found"
    else:
        message = str(exc.detail)
    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {message}")
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to turn any uncaught exception into an opaque 500 envelope.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method
                }
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers and the catch-all middleware."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(ErrorHandlerMiddleware)
