"""Factory for the movie-search client."""

from movie_api.adapters.movies.base import AbstractMovieClient
from movie_api.adapters.movies.collectapi_client import CollectApiMovieClient
from movie_api.core.config import settings


def create_movie_client() -> AbstractMovieClient:
    """Build the CollectAPI client from ``settings.collectapi``.

    The API key is not bound here: it is resolved per request, from the
    client's Authorization header or the configured fallback.
    """
    return CollectApiMovieClient(
        base_url=settings.collectapi.base_url,
        timeout_seconds=settings.collectapi.timeout_seconds,
    )
