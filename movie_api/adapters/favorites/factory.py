"""Factory for favorites stores."""

from movie_api.adapters.favorites.base import AbstractFavoritesStore
from movie_api.adapters.favorites.in_memory import InMemoryFavoritesStore
from movie_api.adapters.favorites.json_file import JsonFileFavoritesStore
from movie_api.core.config import settings
from movie_api.core.errors import ValidationAppError


def create_favorites_store() -> AbstractFavoritesStore:
    """Instantiate the favorites store selected by ``FAVORITES_BACKEND``.

    Raises:
        ValidationAppError: If the backend name is unknown.
    """
    backend = settings.favorites.backend.lower()

    if backend == "memory":
        return InMemoryFavoritesStore()

    if backend == "json_file":
        return JsonFileFavoritesStore(settings.favorites.file_path)

    raise ValidationAppError(
        code="favorites_unknown_backend",
        message=(
            f"Unknown favorites backend: '{backend}'. Supported backends: memory, json_file"
        ),
        details={"backend": backend},
    )
