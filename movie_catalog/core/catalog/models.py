"""
Record types shared by the catalog core and the API layer.
"""

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    """A stored movie."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: list[str]
    rate: float = 0


class FieldError(BaseModel):
    """A single validation failure scoped to one payload field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
