"""Application-level exception types.

Domain errors raised by services and adapters. The global exception handlers
map each subclass to an HTTP status so routes stay free of status-code logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability and clients."""

    hint: str
    http_status: int
    movie_id: str
    parameter: str
    upstream_url: str
    backend: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when input/config validation fails."""


class AuthenticationAppError(AppError):
    """Raised when no upstream API key can be resolved."""


class NotFoundAppError(AppError):
    """Raised when a requested movie or favorite does not exist."""


class UpstreamAppError(AppError):
    """Raised when the movie-search API call fails."""


class StorageAppError(AppError):
    """Raised when the favorites backend cannot read its persisted state."""
