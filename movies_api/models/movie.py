# movies_api/models/movie.py

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Union

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, field_validator

MIN_RELEASE_YEAR = 1900
# Allow a few years into the future for announced releases
FUTURE_YEAR_MARGIN = 5

_url_adapter = TypeAdapter(AnyUrl)


class Genre(str, Enum):
    """Genre tags a movie may be labelled with."""
    ACTION = "Action"
    ADVENTURE = "Adventure"
    CRIME = "Crime"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


def _check_year(v: int) -> int:
    latest = datetime.now(timezone.utc).year + FUTURE_YEAR_MARGIN
    if not (MIN_RELEASE_YEAR <= v <= latest):
        raise ValueError(f"Year must be between {MIN_RELEASE_YEAR} and {latest}.")
    return v


def _check_number(v: Any) -> Any:
    # Only JSON numbers; no coercion of strings or booleans
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("Rate must be a number.")
    return v


def _check_url(v: str) -> str:
    # Validate the URL but keep the string as the client sent it
    try:
        _url_adapter.validate_python(v)
    except ValueError:
        raise ValueError("Poster must be a valid URL.")
    return v


# --- Models for Request Bodies ---
class MovieCreate(BaseModel):
    """Full movie draft, used to validate the body of POST /movies."""
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    title: StrictStr = Field(..., min_length=1, description="Movie title.")
    year: StrictInt = Field(..., description="Year of release.")
    director: StrictStr = Field(..., min_length=1, description="Director name.")
    duration: StrictInt = Field(..., gt=0, description="Running time in minutes.")
    poster: StrictStr = Field(..., description="URL of the poster image.")
    genre: List[Genre] = Field(..., min_length=1, description="Genres the movie belongs to.")
    rate: float = Field(0.0, ge=0, le=10, description="Score between 0 and 10.")

    @field_validator("year")
    @classmethod
    def check_year(cls, v: int) -> int:
        return _check_year(v)

    @field_validator("poster")
    @classmethod
    def check_poster(cls, v: str) -> str:
        return _check_url(v)

    @field_validator("rate", mode="before")
    @classmethod
    def check_rate_is_number(cls, v: Any) -> Any:
        return _check_number(v)


class MovieUpdate(BaseModel):
    """
    Partial movie draft, used to validate the body of PATCH /movies/{id}.

    Every field is optional but must satisfy the same constraints as in
    MovieCreate when present. Explicit nulls are rejected, and `id` is not a
    field so it is dropped with any other unknown key.
    """
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    title: StrictStr = Field(None, min_length=1)
    year: StrictInt = Field(None)
    director: StrictStr = Field(None, min_length=1)
    duration: StrictInt = Field(None, gt=0)
    poster: StrictStr = Field(None)
    genre: List[Genre] = Field(None, min_length=1)
    rate: float = Field(None, ge=0, le=10)

    @field_validator("year")
    @classmethod
    def check_year(cls, v: int) -> int:
        return _check_year(v)

    @field_validator("poster")
    @classmethod
    def check_poster(cls, v: str) -> str:
        return _check_url(v)

    @field_validator("rate", mode="before")
    @classmethod
    def check_rate_is_number(cls, v: Any) -> Any:
        return _check_number(v)


# --- Stored / Response Model ---
class Movie(MovieCreate):
    """A movie as held in the collection and returned by the API."""
    id: StrictStr = Field(..., description="Server generated identifier (UUID4).")


# --- Response Bodies ---
class Violation(BaseModel):
    """A single field-level validation problem."""
    code: str
    path: List[Union[str, int]]
    message: str


class ErrorResponse(BaseModel):
    error: List[Violation]


class MessageResponse(BaseModel):
    message: str
