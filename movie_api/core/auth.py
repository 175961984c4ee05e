"""Upstream API key resolution.

Endpoints that call CollectAPI need a key. Clients may send their own in the
``Authorization`` header; otherwise the service falls back to the key
configured in ``COLLECTAPI_API_KEY``.
"""

from __future__ import annotations

import hashlib
import logging
import re
from typing import Annotated

from fastapi import Header

from movie_api.core.config import settings
from movie_api.core.errors import AuthenticationAppError

logger = logging.getLogger(__name__)

# "apikey" followed by whitespace or nothing; "apikeyXYZ" is a bare key
_APIKEY_SCHEME = re.compile(r"apikey(\s+|$)", re.IGNORECASE)


def normalize_api_key(raw: str | None) -> str | None:
    """Strip whitespace and an optional ``apikey`` scheme prefix.

    Examples:
        >>> normalize_api_key("apikey 123abc")
        '123abc'
        >>> normalize_api_key("  123abc ")
        '123abc'
        >>> normalize_api_key("   ") is None
        True
        >>> normalize_api_key("apikey ") is None
        True
    """
    if raw is None:
        return None

    value = raw.strip()
    scheme = _APIKEY_SCHEME.match(value)
    if scheme:
        value = value[scheme.end():].strip()
    return value or None


def resolve_api_key(header_value: str | None) -> str:
    """Pick the API key to forward upstream.

    Args:
        header_value: Raw ``Authorization`` header value, if any.

    Returns:
        The client-provided key, or the configured fallback key.

    Raises:
        AuthenticationAppError: If neither source provides a key.
    """
    provided = normalize_api_key(header_value)
    if provided:
        logger.debug(
            "auth.client_key",
            extra={"api_key_hash": hashlib.sha256(provided.encode()).hexdigest()[:16]},
        )
        return provided

    configured = normalize_api_key(settings.collectapi.api_key)
    if configured:
        logger.debug("auth.configured_key")
        return configured

    logger.warning("auth.missing_key", extra={"api_key_present": False})
    raise AuthenticationAppError(
        code="missing_api_key",
        message="Missing API key. Please provide authorization header.",
        details={"hint": "Send 'authorization: <CollectAPI key>' or set COLLECTAPI_API_KEY"},
    )


async def get_upstream_api_key(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """FastAPI dependency returning the key for upstream calls.

    Usage:
        @router.get("/search")
        async def search(api_key: str = Depends(get_upstream_api_key)):
            ...
    """
    return resolve_api_key(authorization)
