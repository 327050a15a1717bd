"""
In-memory movie store.

Holds the catalog as an ordered list of Movie records. Every read and
mutation runs under one lock so each operation is atomic when FastAPI
dispatches sync handlers from its thread pool.
"""

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from movie_catalog.core.catalog.models import Movie

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Raised when the seed file cannot be read or holds invalid records."""


def merge_movie(movie: Movie, changes: Dict[str, Any]) -> Movie:
    """
    Apply validated partial fields over an existing record.

    Only keys present in ``changes`` are overwritten; the id never changes.

    Args:
        movie: Existing record
        changes: Validated partial fields (absent keys mean "keep")

    Returns:
        New Movie with the merged values
    """
    merged = movie.model_dump()
    for name, value in changes.items():
        if name == "id" or name not in merged:
            continue
        merged[name] = value
    return Movie(**merged)


class MovieStore:
    """Ordered, lock-guarded collection of movies."""

    def __init__(self, movies: Iterable[Movie] = ()):
        self._movies: List[Movie] = list(movies)
        self._lock = threading.RLock()

    @classmethod
    def from_seed_file(cls, path: Union[str, Path]) -> "MovieStore":
        """
        Load the initial catalog from a JSON array of movie records.

        Args:
            path: Path to the seed JSON file

        Returns:
            MovieStore holding the seed records in file order

        Raises:
            SeedDataError: If the file is missing, malformed, or has duplicate ids
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SeedDataError(f"Cannot read seed file {path}: {e}") from e

        if not isinstance(raw, list):
            raise SeedDataError(f"Seed file {path} must contain a JSON array")

        try:
            movies = [Movie.model_validate(item) for item in raw]
        except ValidationError as e:
            raise SeedDataError(f"Invalid movie in seed file {path}: {e}") from e

        ids = [m.id for m in movies]
        if len(ids) != len(set(ids)):
            raise SeedDataError(f"Seed file {path} contains duplicate ids")

        logger.info("Loaded %d movies from %s", len(movies), path)
        return cls(movies)

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

    def list_movies(self, genre: Optional[str] = None) -> List[Movie]:
        """
        List movies, optionally filtered by genre.

        The filter is a case-insensitive exact match against a movie's genre
        tags; an empty filter returns everything.
        """
        with self._lock:
            if not genre:
                return list(self._movies)
            wanted = genre.lower()
            return [
                m for m in self._movies
                if any(g.lower() == wanted for g in m.genre)
            ]

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            index = self._index_of(movie_id)
            return None if index is None else self._movies[index]

    def create_movie(self, data: Dict[str, Any]) -> Movie:
        """
        Append a new movie built from validated fields.

        Args:
            data: Normalized output of validate_movie

        Returns:
            The stored Movie with its generated id
        """
        with self._lock:
            movie = Movie(id=self._new_id(), **data)
            self._movies.append(movie)
        logger.info("Created movie %s: %s", movie.id, movie.title)
        return movie

    def update_movie(self, movie_id: str, changes: Dict[str, Any]) -> Optional[Movie]:
        """
        Merge validated partial fields into an existing movie.

        Returns:
            Updated Movie, or None if the id is unknown
        """
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return None
            updated = merge_movie(self._movies[index], changes)
            self._movies[index] = updated
        logger.info("Updated movie %s fields=%s", movie_id, sorted(changes))
        return updated

    def delete_movie(self, movie_id: str) -> bool:
        """Remove a movie; returns False if the id is unknown."""
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return False
            del self._movies[index]
        logger.info("Deleted movie %s", movie_id)
        return True

    def _index_of(self, movie_id: str) -> Optional[int]:
        for i, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return i
        return None

    def _new_id(self) -> str:
        existing = {m.id for m in self._movies}
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in existing:
                return candidate
