"""Pydantic schemas for movie lookups and favorites.

Upstream payloads are passed through as-is; these models only describe and
validate the parts the service relies on.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MovieRating(BaseModel):
    """One rating source entry (IMDb, Rotten Tomatoes, Metacritic...)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    source: str = Field(..., alias="Source")
    value: str = Field(..., alias="Value")


class MovieDetails(BaseModel):
    """Movie record returned by ``imdbSearchById``.

    Only ``imdbID`` is required; the rest is optional because the upstream
    omits fields for obscure titles.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    imdb_id: str = Field(..., alias="imdbID", min_length=1, description="IMDB identifier, e.g. tt0111161.")
    title: str | None = Field(default=None, alias="Title")
    year: str | None = Field(default=None, alias="Year")
    genre: str | None = Field(default=None, alias="Genre")
    director: str | None = Field(default=None, alias="Director")
    plot: str | None = Field(default=None, alias="Plot")
    poster: str | None = Field(default=None, alias="Poster")
    imdb_rating: str | None = Field(default=None, alias="imdbRating")
    ratings: list[MovieRating] = Field(default_factory=list, alias="Ratings")


class MovieLookupResponse(BaseModel):
    """Envelope of a by-id lookup: ``{"success": ..., "result": {...}}``."""

    model_config = ConfigDict(extra="allow")

    result: MovieDetails


class DeleteFavoriteResponse(BaseModel):
    message: str = Field(..., description="Confirmation message.")


FavoriteMovie = dict[str, Any]
