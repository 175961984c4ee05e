"""CollectAPI IMDB client adapter."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from movie_api.adapters.movies.base import AbstractMovieClient
from movie_api.core.errors import UpstreamAppError

logger = logging.getLogger(__name__)


class CollectApiMovieClient(AbstractMovieClient):
    """Async client for the CollectAPI ``imdbSearchByName``/``imdbSearchById`` endpoints.

    Payloads are passed through untouched; only transport failures, error
    statuses and non-JSON bodies are turned into ``UpstreamAppError``.
    """

    def __init__(
        self,
        base_url: str = "https://api.collectapi.com/imdb",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the underlying httpx client.

        Args:
            base_url: CollectAPI IMDB base URL.
            timeout_seconds: Timeout for each upstream request.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"content-type": "application/json"},
        )

    async def search_by_name(self, query: str, *, api_key: str) -> dict[str, Any]:
        return await self._get("/imdbSearchByName", {"query": query}, api_key=api_key)

    async def search_by_id(self, movie_id: str, *, api_key: str) -> dict[str, Any]:
        return await self._get("/imdbSearchById", {"movieId": movie_id}, api_key=api_key)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get(self, path: str, params: dict[str, str], *, api_key: str) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.get(
                path,
                params=params,
                headers={"authorization": f"apikey {api_key}"},
            )
        except httpx.HTTPError as exc:
            logger.error(
                "movies.upstream_unreachable",
                extra={"upstream_url": url, "error_type": type(exc).__name__},
            )
            raise UpstreamAppError(
                code="upstream_unavailable",
                message="Failed to fetch IMDB data",
                details={"upstream_url": url},
            ) from exc

        if response.is_error:
            logger.error(
                "movies.upstream_error",
                extra={"upstream_url": url, "status_code": response.status_code},
            )
            raise UpstreamAppError(
                code="upstream_error",
                message="Failed to fetch IMDB data",
                details={"upstream_url": url, "http_status": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error(
                "movies.upstream_invalid_json",
                extra={"upstream_url": url, "status_code": response.status_code},
            )
            raise UpstreamAppError(
                code="upstream_invalid_response",
                message="IMDB API returned a non-JSON response",
                details={"upstream_url": url, "http_status": response.status_code},
            ) from exc

        logger.debug(
            "movies.upstream_ok",
            extra={"upstream_url": url, "status_code": response.status_code},
        )
        return payload
