"""Rate limiting middleware for every route.

This module wires the sliding-window limiter into the HTTP layer.

Key policy (``APP_RATE_LIMIT_KEY_POLICY``):
- ``client``: one quota per origin address, shared by all endpoints.
- ``client_path``: one quota per (origin address, request path) pair.

Requests whose origin address is unknown all share the ``ip:unknown`` bucket.
"""

from __future__ import annotations

import hashlib
import logging

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from movie_api.adapters.rate_limit.base import AbstractRateLimiter
from movie_api.adapters.rate_limit.sliding_window import SlidingWindowRateLimiter
from movie_api.core.config import RateLimitKeyPolicy, settings

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"
TOO_MANY_REQUESTS_BODY = "Too many requests"


_limiter: AbstractRateLimiter | None = None
_limiter_config: tuple[float, int] | None = None


def get_rate_limiter() -> AbstractRateLimiter:
    """Return the process-wide rate limiter instance.

    The instance is cached in-module so its registry survives across
    requests. If the window or limit settings change (primarily in tests),
    the limiter is rebuilt with an empty registry.
    """

    global _limiter, _limiter_config

    config = (
        settings.app.rate_limit_window_seconds,
        settings.app.rate_limit_requests,
    )

    if _limiter is None or _limiter_config != config:
        _limiter = SlidingWindowRateLimiter(
            window_seconds=settings.app.rate_limit_window_seconds,
            max_requests=settings.app.rate_limit_requests,
        )
        _limiter_config = config

    return _limiter


def reset_rate_limiter() -> None:
    """Drop the cached limiter so the next request starts from a clean registry."""

    global _limiter, _limiter_config
    _limiter = None
    _limiter_config = None


def build_client_key(request: Request, policy: RateLimitKeyPolicy) -> str:
    """Build the limiter key for the current request.

    Args:
        request: Incoming request.
        policy: ``client`` or ``client_path``.

    Returns:
        Namespaced limiter key such as ``ip:10.0.0.1`` or
        ``ip:10.0.0.1:/imdbSearchByName``.
    """

    client_host = request.client.host if request.client and request.client.host else UNKNOWN_CLIENT
    if policy == "client_path":
        return f"ip:{client_host}:{request.url.path}"
    return f"ip:{client_host}"


def _hash_limiter_key(key: str) -> str:
    """Hash the limiter key for logging without exposing client addresses."""
    return hashlib.sha256(key.encode()).hexdigest()[:16]


def too_many_requests_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=TOO_MANY_REQUESTS_BODY,
    )


async def rate_limit_middleware(request: Request, call_next) -> Response:
    """HTTP middleware admitting or rejecting each request before routing.

    Rejected requests get ``429`` with the bare JSON string
    ``"Too many requests"`` and never reach a route handler.
    """

    if not settings.app.rate_limit_enabled:
        return await call_next(request)

    policy = settings.app.rate_limit_key_policy
    key = build_client_key(request, policy)
    limiter = get_rate_limiter()
    result = limiter.admit(key)

    log_extra = {
        "key_policy": policy,
        "key_hash": _hash_limiter_key(key),
        "limit": result.limit,
        "remaining": result.remaining,
        "window_s": settings.app.rate_limit_window_seconds,
        "path": request.url.path,
    }

    if result.allowed:
        logger.debug("rate_limit.allowed", extra=log_extra)
        return await call_next(request)

    logger.warning("rate_limit.exceeded", extra=log_extra)
    return too_many_requests_response()
