from abc import ABC, abstractmethod
from typing import Any


class AbstractMovieClient(ABC):
    """Interface for movie-search API clients."""

    @abstractmethod
    async def search_by_name(self, query: str, *, api_key: str) -> dict[str, Any]:
        """Search movies by (partial) title.

        Args:
            query: Movie name to search for.
            api_key: Key forwarded to the upstream API.

        Returns:
            dict[str, Any]: Upstream JSON payload, unmodified.

        Raises:
            UpstreamAppError: If the call fails or the body is not JSON.
        """
        ...

    @abstractmethod
    async def search_by_id(self, movie_id: str, *, api_key: str) -> dict[str, Any]:
        """Look up a single movie by IMDB id (e.g. ``tt0111161``).

        Raises:
            UpstreamAppError: If the call fails or the body is not JSON.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the client."""
        return None
