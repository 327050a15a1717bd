"""
Movie catalog core.

This package contains:
- Payload validation for full and partial movie records
- The in-memory, lock-guarded movie store
- The origin gate for cross-origin requests
"""

from movie_catalog.core.catalog.origins import (
    DEFAULT_ALLOWED_ORIGINS,
    OriginGate,
    OriginRejectedError,
)
from movie_catalog.core.catalog.models import FieldError, Movie
from movie_catalog.core.catalog.store import MovieStore, SeedDataError, merge_movie
from movie_catalog.core.catalog.validation import (
    GENRES,
    ValidationResult,
    validate_movie,
    validate_partial_movie,
)

__all__ = [
    'DEFAULT_ALLOWED_ORIGINS',
    'OriginGate',
    'OriginRejectedError',
    'Movie',
    'MovieStore',
    'SeedDataError',
    'merge_movie',
    'GENRES',
    'FieldError',
    'ValidationResult',
    'validate_movie',
    'validate_partial_movie',
]
