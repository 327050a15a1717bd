"""
Movie API endpoints.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from movie_catalog.api.dependencies import get_store
from movie_catalog.api.models.movie import Movie, MovieDeleted, ValidationErrorResponse
from movie_catalog.core.catalog.store import MovieStore
from movie_catalog.core.catalog.validation import (
    ValidationResult,
    validate_movie,
    validate_partial_movie,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

NOT_FOUND = "Movie not found"


def _invalid(result: ValidationResult) -> JSONResponse:
    logger.info("Rejected movie payload: %s", [e.message for e in result.errors])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": [e.model_dump() for e in result.errors]},
    )


@router.get("", response_model=list[Movie])
def list_movies(
    genre: str | None = Query(None),
    store: MovieStore = Depends(get_store),
):
    """List all movies, or only those tagged with `genre` (case-insensitive)."""
    return store.list_movies(genre=genre)


@router.get("/{movie_id}", response_model=Movie, responses={404: {"description": NOT_FOUND}})
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Get movie details by ID."""
    movie = store.get_movie(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return movie


@router.post(
    "",
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
def create_movie(payload: Any = Body(None), store: MovieStore = Depends(get_store)):
    """Validate and add a new movie; the server assigns its id."""
    result = validate_movie(payload)
    if not result.success:
        return _invalid(result)
    return store.create_movie(result.data)


@router.patch(
    "/{movie_id}",
    response_model=Movie,
    responses={400: {"model": ValidationErrorResponse}, 404: {"description": NOT_FOUND}},
)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_store),
):
    """Update only the fields present in the body."""
    if store.get_movie(movie_id) is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    result = validate_partial_movie(payload)
    if not result.success:
        return _invalid(result)

    movie = store.update_movie(movie_id, result.data)
    if movie is None:
        # Deleted between lookup and merge
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return movie


@router.delete("/{movie_id}", response_model=MovieDeleted, responses={404: {"description": NOT_FOUND}})
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Remove a movie from the catalog."""
    if not store.delete_movie(movie_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return MovieDeleted(id=movie_id)
