"""Movie service: upstream search pass-through and the favorites list.

Routes stay thin; this service owns input validation, the upstream calls
and the favorites bookkeeping.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from movie_api.adapters.favorites.base import AbstractFavoritesStore
from movie_api.adapters.movies.base import AbstractMovieClient
from movie_api.core.errors import NotFoundAppError, ValidationAppError
from movie_api.schemas.movies import DeleteFavoriteResponse, FavoriteMovie, MovieLookupResponse

logger = logging.getLogger(__name__)


def _require(value: str | None, *, parameter: str) -> str:
    """Return the stripped value or raise a 400-mapped validation error."""
    if value is None or not value.strip():
        raise ValidationAppError(
            code=f"missing_{parameter}",
            message=f"Missing {parameter} parameter",
            details={"parameter": parameter},
        )
    return value.strip()


class MovieService:
    """Search movies upstream and manage the favorites collection.

    Attributes:
        client: Upstream movie-search client.
        favorites: Favorites document store keyed by IMDB id.
    """

    def __init__(self, client: AbstractMovieClient, favorites: AbstractFavoritesStore) -> None:
        self.client = client
        self.favorites = favorites

    async def search_by_name(self, query: str | None, *, api_key: str) -> dict[str, Any]:
        """Pass a by-name search through to the upstream API.

        Raises:
            ValidationAppError: If query is missing or blank.
            UpstreamAppError: If the upstream call fails.
        """
        query = _require(query, parameter="query")
        return await self.client.search_by_name(query, api_key=api_key)

    async def search_by_id(self, movie_id: str | None, *, api_key: str) -> dict[str, Any]:
        movie_id = _require(movie_id, parameter="id")
        return await self.client.search_by_id(movie_id, api_key=api_key)

    async def add_favorite(self, movie_id: str | None, *, api_key: str) -> dict[str, Any]:
        """Fetch a movie by id and store the full payload as a favorite.

        The document id is the ``imdbID`` reported by the upstream, which
        may differ in case from the requested id.

        Returns:
            The upstream payload that was stored.

        Raises:
            ValidationAppError: If id is missing or blank.
            NotFoundAppError: If the upstream payload has no ``result.imdbID``.
            UpstreamAppError: If the upstream call fails.
        """
        movie_id = _require(movie_id, parameter="id")
        payload = await self.client.search_by_id(movie_id, api_key=api_key)

        try:
            lookup = MovieLookupResponse.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "favorites.add_rejected",
                extra={"movie_id": movie_id, "reason": "no_result", "errors": exc.error_count()},
            )
            raise NotFoundAppError(
                code="movie_not_found",
                message="Movie not found",
                details={"movie_id": movie_id},
            ) from exc

        doc_id = lookup.result.imdb_id
        self.favorites.set(doc_id, payload)
        logger.info("favorites.added", extra={"movie_id": doc_id})
        return payload

    def list_favorites(self) -> list[FavoriteMovie]:
        """Return favorites as ``{"id": doc_id, **document}`` dicts."""
        return [{"id": doc_id, **document} for doc_id, document in self.favorites.list()]

    def delete_favorite(self, movie_id: str | None) -> DeleteFavoriteResponse:
        """Remove a favorite.

        Raises:
            ValidationAppError: If id is missing or blank.
            NotFoundAppError: If no favorite exists under that id.
        """
        movie_id = _require(movie_id, parameter="id")

        if not self.favorites.delete(movie_id):
            raise NotFoundAppError(
                code="movie_not_found",
                message="Movie not found",
                details={"movie_id": movie_id},
            )

        logger.info("favorites.deleted", extra={"movie_id": movie_id})
        return DeleteFavoriteResponse(message="Movie deleted successfully")
