"""Process-wide service wiring for route dependencies.

Tests replace these through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from movie_api.adapters.favorites.base import AbstractFavoritesStore
from movie_api.adapters.favorites.factory import create_favorites_store
from movie_api.adapters.movies.base import AbstractMovieClient
from movie_api.adapters.movies.factory import create_movie_client
from movie_api.services.movie_service import MovieService


@lru_cache(maxsize=1)
def get_movie_client() -> AbstractMovieClient:
    return create_movie_client()


@lru_cache(maxsize=1)
def get_favorites_store() -> AbstractFavoritesStore:
    return create_favorites_store()


def get_movie_service() -> MovieService:
    return MovieService(client=get_movie_client(), favorites=get_favorites_store())
