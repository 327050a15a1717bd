"""
Movie payload validation.

Wraps the pydantic input schemas in two pure functions that never raise on
bad input. Each returns a ValidationResult carrying either the normalized
record or a list of field-scoped, human-readable error messages.
"""

from datetime import date
from typing import Any, Dict, List, Literal, Optional, get_args

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from movie_catalog.core.catalog.models import FieldError


GenreTag = Literal[
    "Action",
    "Adventure",
    "Comedy",
    "Crime",
    "Drama",
    "Fantasy",
    "Horror",
    "History",
    "Thriller",
    "Sci-Fi",
]
GENRES: tuple = get_args(GenreTag)

MIN_YEAR = 1900

_url_adapter = TypeAdapter(AnyUrl)


def current_year() -> int:
    """Latest release year accepted by the schema."""
    return date.today().year


class MovieFields(BaseModel):
    """Field rules shared by full and partial movie payloads."""

    model_config = ConfigDict(strict=True, extra="ignore")

    @field_validator("year", "duration", mode="before", check_fields=False)
    @classmethod
    def accept_integral_float(cls, value: Any) -> Any:
        # JSON has a single number type, so 2020.0 is the integer 2020.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("year", check_fields=False)
    @classmethod
    def check_year(cls, value: int) -> int:
        latest = current_year()
        if not MIN_YEAR <= value <= latest:
            raise ValueError(f"year must be between {MIN_YEAR} and {latest}")
        return value

    @field_validator("poster", check_fields=False)
    @classmethod
    def check_poster(cls, value: str) -> str:
        # Keep the caller's string; AnyUrl would normalize it.
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("poster must be a valid URL") from None
        return value


class MovieCreate(MovieFields):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1)
    year: int
    director: str
    duration: int = Field(..., gt=0)
    poster: str
    genre: List[GenreTag] = Field(..., min_length=1)
    rate: float = Field(0, ge=0, le=10)


class MovieUpdate(MovieFields):
    """Request body for a partial update (all fields optional, none nullable)."""

    title: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = None
    director: Optional[str] = None
    duration: Optional[int] = Field(None, gt=0)
    poster: Optional[str] = None
    genre: Optional[List[GenreTag]] = Field(None, min_length=1)
    rate: Optional[float] = Field(None, ge=0, le=10)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} must not be null")
        return value


class ValidationResult(BaseModel):
    """Tagged outcome of validating a payload."""

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = []

    @classmethod
    def ok(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, errors: List[FieldError]) -> "ValidationResult":
        return cls(success=False, errors=errors)


def describe_error(error: Dict[str, Any], skip: int = 0) -> FieldError:
    """
    Turn one pydantic error entry into a FieldError.

    Args:
        error: Entry from ValidationError.errors()
        skip: Number of leading location parts to drop (e.g. "body")

    Returns:
        FieldError with a readable message
    """
    loc = error.get("loc", ())[skip:]
    name = str(loc[0]) if loc else "body"
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "missing":
        message = f"{name} is required"
    elif kind == "string_type":
        message = f"{name} must be a string"
    elif kind in ("int_type", "int_from_float"):
        message = f"{name} must be an integer"
    elif kind == "float_type":
        message = f"{name} must be a number"
    elif kind == "list_type":
        message = f"{name} must be an array"
    elif kind == "literal_error":
        message = f"{name} must be one of the enumerated values: {', '.join(GENRES)}"
    elif kind == "string_too_short":
        message = f"{name} must not be empty"
    elif kind == "too_short":
        message = f"{name} must contain at least one value"
    elif kind == "greater_than":
        message = f"{name} must be greater than {ctx.get('gt'):g}"
    elif kind == "greater_than_equal":
        message = f"{name} must be at least {ctx.get('ge'):g}"
    elif kind == "less_than_equal":
        message = f"{name} must be at most {ctx.get('le'):g}"
    elif kind == "json_invalid":
        name = "body"
        message = "body must be valid JSON"
    elif kind in ("model_type", "model_attributes_type", "dict_type"):
        name = "body"
        message = "body must be a JSON object"
    elif kind == "value_error" and "error" in ctx:
        message = str(ctx["error"])
    else:
        message = f"{name}: {error.get('msg', 'invalid value')}"
    return FieldError(field=name, message=message)


def _validate(schema: type, payload: Any, **dump_options) -> ValidationResult:
    if not isinstance(payload, dict):
        return ValidationResult.failed(
            [FieldError(field="body", message="body must be a JSON object")]
        )
    try:
        model = schema.model_validate(payload)
    except ValidationError as e:
        return ValidationResult.failed([describe_error(err) for err in e.errors()])
    return ValidationResult.ok(model.model_dump(**dump_options))


def validate_movie(payload: Any) -> ValidationResult:
    """Validate a full movie payload; rate defaults to 0 when absent."""
    return _validate(MovieCreate, payload)


def validate_partial_movie(payload: Any) -> ValidationResult:
    """Validate a partial payload; only fields actually sent are returned."""
    return _validate(MovieUpdate, payload, exclude_unset=True)
