"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel

from movie_catalog.core.catalog.models import FieldError, Movie


class MovieDeleted(BaseModel):
    """Response model confirming a deletion."""

    message: str = "Movie deleted"
    id: str


class ValidationErrorResponse(BaseModel):
    """Body returned with 400 responses."""

    error: list[FieldError]


__all__ = ["Movie", "MovieDeleted", "FieldError", "ValidationErrorResponse"]
