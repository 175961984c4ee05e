"""Global exception handlers for consistent error responses.

Design:
- AppError subclasses → mapped HTTP status (400, 401, 404, 500)
- Unexpected Exception → generic 500 (safety net)
- All responses include request_id for log correlation
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from movie_api.core.errors import (
    AppError,
    AuthenticationAppError,
    NotFoundAppError,
    StorageAppError,
    UpstreamAppError,
)
from movie_api.core.config import settings
from movie_api.core.logging import get_request_id

logger = logging.getLogger(__name__)


_STATUS_BY_ERROR: tuple[tuple[type[AppError], int], ...] = (
    (AuthenticationAppError, 401),
    (NotFoundAppError, 404),
    (UpstreamAppError, 500),
    (StorageAppError, 500),
)


def _resolve_request_id(request: Request) -> str | None:
    """Return the current request id.

    Unhandled exceptions reach the 500 handler after the request-id middleware
    has cleared its context var, so fall back to the id it left on
    ``request.state`` and then to the incoming header.
    """
    request_id = get_request_id() or getattr(request.state, "request_id", None)
    if isinstance(request_id, str) and request_id:
        return request_id
    header_value = request.headers.get(settings.log.request_id_header)
    return header_value if isinstance(header_value, str) and header_value else None


def status_for_error(exc: AppError) -> int:
    """Return the HTTP status code for a domain error (400 when unmapped)."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 400


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain application errors with consistent JSON format.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with ``{"error": {code, message, request_id, details?}}``.
    """
    status_code = status_for_error(exc)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "has_details": bool(exc.details),
            "request_path": request.url.path,
        },
    )

    error_content = {
        "code": exc.code,
        "message": exc.message,
        "request_id": _resolve_request_id(request),
    }
    if exc.details:
        error_content["details"] = exc.details

    return JSONResponse(
        status_code=status_code,
        content={"error": error_content},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors.

    Logs the failure and returns a generic message; nothing from the
    exception itself reaches the client.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": _resolve_request_id(request),
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(Exception)(general_exception_handler)
