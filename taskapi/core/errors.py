"""Application error kinds and the handlers that turn them into the JSON envelope."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskapi.core.config import settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors raised by services and dependencies."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors
        self.headers = headers
        super().__init__(self.message)


class ConflictError(AppError):
    """Duplicate username or email. Reported as 400 to match the public API."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Duplicate entry. This record already exists."

    def __init__(self, message: str | None = None, field: str | None = None) -> None:
        message = message or self.default_message
        errors = [{"field": field, "message": message}] if field else None
        super().__init__(message, errors=errors)


class SelfDeletionError(ConflictError):
    """An account tried to delete itself."""

    default_message = "You cannot delete your own account"


class UnauthenticatedError(AppError):
    """Missing, invalid or expired bearer token, or the token's user is gone."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentialsError(AppError):
    """Login failed. One message for unknown email and wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied. Insufficient permissions."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


def envelope(
    success: bool,
    message: str | None = None,
    data: Any = None,
    errors: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build the response envelope, leaving out keys that have no value."""
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if errors is not None:
        body["errors"] = errors
    return body


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "title") -> "title"; ("path", "task_id") -> "task_id"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(False, exc.message, errors=exc.errors),
        headers=exc.headers,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": _field_name(tuple(err.get("loc", ()))),
            # Messages raised by our own field validators come prefixed by pydantic.
            "message": str(err.get("msg", "")).removeprefix("Value error, "),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope(False, "Validation failed", errors=errors),
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "API endpoint not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(False, message),
        headers=getattr(exc, "headers", None),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(
        "Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope(False, ConflictError.default_message),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = f"Internal server error: {exc}" if settings.DEBUG else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=envelope(False, message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler so that all failures leave as the JSON envelope."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
