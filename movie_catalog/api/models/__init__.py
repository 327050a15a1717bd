"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import (
    FieldError,
    Movie,
    MovieDeleted,
    ValidationErrorResponse,
)

__all__ = [
    "Movie",
    "MovieDeleted",
    "FieldError",
    "ValidationErrorResponse",
]
