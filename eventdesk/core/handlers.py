from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into the API's ``{success: false, message, code?, errors?}``
error envelope with the matching HTTP status code.
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog import get_logger

from eventdesk.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    DuplicateUserError,
    EmailServiceError,
    EventDeskError,
    NotFoundError,
    PasswordResetError,
    PermissionError,
    ValidationError,
)
from eventdesk.utils.i18n import get_request_language, get_translated_message

__all__ = [
    "error_body",
    "validation_error_handler",
    "request_validation_error_handler",
    "duplicate_user_error_handler",
    "password_reset_error_handler",
    "authentication_error_handler",
    "permission_error_handler",
    "not_found_error_handler",
    "http_exception_handler",
    "database_error_handler",
    "email_service_error_handler",
    "eventdesk_error_handler",
    "unhandled_exception_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _language(request: Request) -> str:
    return getattr(request.state, "language", None) or get_request_language(request)


def _client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def error_body(message: str, code: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    if code:
        body["code"] = code
    if errors is not None:
        body["errors"] = errors
    return body


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handles domain `ValidationError`, returning a `400 Bad Request`.

    Raised for values that pass request parsing but violate a domain rule,
    such as a status outside the lifecycle vocabulary.
    """
    errors = [{"field": exc.field, "message": exc.message}] if exc.field else None
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, exc.code, errors),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handles request schema failures, returning a `400 Bad Request`.

    Every failing field is reported with its location and the reason.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.info("Request validation failed", path=request.url.path, error_count=len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            get_translated_message("validation_failed", _language(request)),
            "validation_error",
            errors,
        ),
    )


async def duplicate_user_error_handler(request: Request, exc: DuplicateUserError) -> JSONResponse:
    """Handles `DuplicateUserError`, returning a `400 Bad Request`."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, exc.code),
    )


async def password_reset_error_handler(request: Request, exc: PasswordResetError) -> JSONResponse:
    """Handles `PasswordResetError`, returning a `400 Bad Request`.

    This is for errors during the final step of a password reset, such as
    using an invalid, expired or already used token.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, exc.code),
    )


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    This handler catches failed logins and missing, invalid or expired
    bearer tokens.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(exc.message, exc.code),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_error_handler(request: Request, exc: PermissionError) -> JSONResponse:
    """Handles `PermissionError`, returning a `403 Forbidden`."""
    logger.warning(
        "Permission denied",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=error_body(exc.message, exc.code),
    )


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Handles `NotFoundError` and its subclasses, returning a `404 Not Found`."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(exc.message, exc.code),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wraps framework HTTP errors (unknown route, wrong method) in the error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handles `DatabaseError`, returning a `500 Internal Server Error`.

    The driver error is logged; the client only sees a generic message.
    """
    logger.critical(
        "A critical database error occurred",
        error_message=str(exc),
        cause=repr(exc.__cause__) if exc.__cause__ else None,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(get_translated_message("internal_server_error", _language(request)), exc.code),
    )


async def email_service_error_handler(request: Request, exc: EmailServiceError) -> JSONResponse:
    """Handles `EmailServiceError`, returning a `500 Internal Server Error`."""
    logger.error(
        "Email service interaction failed",
        error_message=str(exc),
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(get_translated_message("internal_server_error", _language(request)), exc.code),
    )


async def eventdesk_error_handler(request: Request, exc: EventDeskError) -> JSONResponse:
    """Handles the base `EventDeskError`, returning a `500 Internal Server Error`.

    This serves as a fallback for any custom application errors that do not
    have a more specific handler.
    """
    logger.error(
        "An unhandled application error occurred",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(get_translated_message("internal_server_error", _language(request)), exc.code),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", path=request.url.path, error_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(get_translated_message("internal_server_error", _language(request))),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application.

    Handlers are resolved along the exception's MRO, so
    ``PasswordResetError`` is answered with 400 even though it is an
    ``AuthenticationError``.

    Args:
        app: The `FastAPI` application instance.
    """
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(DuplicateUserError, duplicate_user_error_handler)
    app.add_exception_handler(PasswordResetError, password_reset_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(PermissionError, permission_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(EmailServiceError, email_service_error_handler)
    app.add_exception_handler(EventDeskError, eventdesk_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
