"""Application factory for the FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers) so
tests can build fresh instances.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from movie_api.api.dependencies import get_favorites_store, get_movie_client
from movie_api.api.routes import favorites_router, health_router, movies_router
from movie_api.core.config import settings
from movie_api.core.exception_handlers import setup_exception_handlers
from movie_api.core.logging import configure_logging
from movie_api.core.middleware import request_id_middleware
from movie_api.core.openapi import TAGS_METADATA, apply_openapi_customizations
from movie_api.core.rate_limit import rate_limit_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "app.startup",
        extra={
            "app_env": settings.app_env,
            "rate_limit_enabled": settings.app.rate_limit_enabled,
            "rate_limit_requests": settings.app.rate_limit_requests,
            "rate_limit_window_s": settings.app.rate_limit_window_seconds,
            "rate_limit_key_policy": settings.app.rate_limit_key_policy,
            "favorites_backend": settings.favorites.backend,
        },
    )
    yield
    if get_movie_client.cache_info().currsize:
        await get_movie_client().aclose()
    # A later lifespan (tests, reloads) must build a fresh client, not reuse a closed one
    get_movie_client.cache_clear()
    logger.info("app.shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Returns:
        Configured app with middleware, handlers, routers and docs.

    Raises:
        ValidationAppError: If ``FAVORITES_BACKEND`` names an unknown backend.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    # Build the store now so a misconfigured backend fails at startup
    get_favorites_store()

    app = FastAPI(
        title="Movie API",
        description=(
            "Thin façade over the CollectAPI IMDB search API with a favorites list. "
            "Every route is behind a per-client sliding-window rate limiter."
        ),
        version="1.0.0",
        docs_url="/api-docs",
        openapi_tags=TAGS_METADATA,
        lifespan=lifespan,
    )

    # Middleware: the last one registered runs first, so request ids wrap
    # the rate limiter and 429 responses are correlated too.
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(movies_router)
    app.include_router(favorites_router)
    app.include_router(health_router)

    apply_openapi_customizations(app)

    return app
