from __future__ import annotations

from movie_api.api.routes.favorites import router as favorites_router
from movie_api.api.routes.health import router as health_router
from movie_api.api.routes.movies import router as movies_router

__all__ = ["favorites_router", "health_router", "movies_router"]
