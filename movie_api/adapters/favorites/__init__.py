"""Favorites storage adapters."""

from movie_api.adapters.favorites.base import AbstractFavoritesStore
from movie_api.adapters.favorites.factory import create_favorites_store
from movie_api.adapters.favorites.in_memory import InMemoryFavoritesStore
from movie_api.adapters.favorites.json_file import JsonFileFavoritesStore

__all__ = [
    "AbstractFavoritesStore",
    "InMemoryFavoritesStore",
    "JsonFileFavoritesStore",
    "create_favorites_store",
]
