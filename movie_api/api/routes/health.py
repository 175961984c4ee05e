from __future__ import annotations

from fastapi import APIRouter

from movie_api.core.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Liveness probe.

    Goes through the rate limiter like every other route, so monitoring that
    polls faster than the configured quota will see 429s.
    """

    return {"status": "ok", "environment": settings.app_env}
