from typing import Any

from fastapi import APIRouter, Depends, Query

from movie_api.api.dependencies import get_movie_service
from movie_api.core.auth import get_upstream_api_key
from movie_api.services.movie_service import MovieService

router = APIRouter(tags=["Movies"])


@router.get("/imdbSearchByName", summary="Search IMDB by movie name")
async def imdb_search_by_name(
    query: str | None = Query(None, description="Movie name to search for"),
    api_key: str = Depends(get_upstream_api_key),
    service: MovieService = Depends(get_movie_service),
) -> dict[str, Any]:
    """Search movies by name through CollectAPI.

    Returns the upstream JSON unmodified. Missing ``query`` → 400, no API
    key → 401, upstream failure → 500.
    """
    return await service.search_by_name(query, api_key=api_key)


@router.get("/imdbSearchById", summary="Search IMDB by movie id")
async def imdb_search_by_id(
    id: str | None = Query(None, description="Movie id to search for"),
    api_key: str = Depends(get_upstream_api_key),
    service: MovieService = Depends(get_movie_service),
) -> dict[str, Any]:
    return await service.search_by_id(id, api_key=api_key)
