"""Movie-search adapter layer - abstracts over the upstream IMDB API."""

from movie_api.adapters.movies.base import AbstractMovieClient
from movie_api.adapters.movies.collectapi_client import CollectApiMovieClient
from movie_api.adapters.movies.factory import create_movie_client

__all__ = [
    "AbstractMovieClient",
    "CollectApiMovieClient",
    "create_movie_client",
]
