from typing import Any

from fastapi import APIRouter, Depends, Query

from movie_api.api.dependencies import get_movie_service
from movie_api.core.auth import get_upstream_api_key
from movie_api.schemas.movies import DeleteFavoriteResponse
from movie_api.services.movie_service import MovieService

router = APIRouter(tags=["Favorites"])


@router.post("/addFavoritesMoviesById", summary="Add favorite movie by id")
async def add_favorite_movie(
    id: str | None = Query(None, description="Movie id to add"),
    api_key: str = Depends(get_upstream_api_key),
    service: MovieService = Depends(get_movie_service),
) -> dict[str, Any]:
    """Look the movie up upstream and store it in the favorites list.

    Responds with the stored upstream payload.
    """
    return await service.add_favorite(id, api_key=api_key)


@router.get("/getFavoritesMovies", summary="Get favorite movies")
def get_favorite_movies(
    service: MovieService = Depends(get_movie_service),
) -> list[dict[str, Any]]:
    return service.list_favorites()


@router.delete(
    "/deleteFromFavoritesMoviesById",
    summary="Delete favorite movie by id",
    response_model=DeleteFavoriteResponse,
)
def delete_favorite_movie(
    id: str | None = Query(None, description="Movie id to delete"),
    service: MovieService = Depends(get_movie_service),
) -> DeleteFavoriteResponse:
    return service.delete_favorite(id)
