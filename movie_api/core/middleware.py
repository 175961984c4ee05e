"""HTTP middleware for request ID propagation and correlation.

The middleware:
- Accepts the incoming X-Request-ID header or generates a UUID
- Stores request_id in contextvars for the whole request lifecycle
- Echoes request_id and the request duration in response headers
- Clears context after the request so ids never leak between requests

Usage:
    app.middleware("http")(request_id_middleware)
"""

from __future__ import annotations

import time
import uuid

from fastapi import Request, Response

from movie_api.core.config import settings
from movie_api.core.logging import clear_request_id, set_request_id


async def request_id_middleware(request: Request, call_next) -> Response:
    """Attach a correlation id and timing header to every response.

    Registered outermost, so rate-limited (429) responses carry the headers
    as well.
    """

    header_name = settings.log.request_id_header
    request_id = request.headers.get(header_name) or str(uuid.uuid4())
    set_request_id(request_id)
    # Outlives the context var for handlers that run after call_next unwinds
    request.state.request_id = request_id
    start = time.perf_counter()
    try:
        response: Response = await call_next(request)
    finally:
        clear_request_id()

    duration_ms = (time.perf_counter() - start) * 1000
    response.headers[header_name] = request_id
    response.headers.setdefault("X-Request-Duration-ms", f"{duration_ms:.2f}")
    return response
