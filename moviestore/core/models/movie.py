# moviestore/core/models/movie.py
from typing import Annotated, List

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from moviestore.core.models.enums import Genre

# ─── Schema constants ────────────────────────────────────────────────────────
MIN_YEAR     = 1888
MAX_YEAR     = 2023
MIN_RATE     = 1
MAX_RATE     = 10
DEFAULT_RATE = 5

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # keep the caller's text, only check that it parses
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Poster must be a valid URL") from None
    return value


# ─── Per-field rules ─────────────────────────────────────────────────────────
Title    = Annotated[StrictStr,   Field(min_length=1)]
Year     = Annotated[StrictInt,   Field(ge=MIN_YEAR, le=MAX_YEAR)]
Director = StrictStr
Duration = Annotated[StrictInt,   Field(gt=0)]
Rate     = Annotated[StrictFloat, Field(ge=MIN_RATE, le=MAX_RATE)]
Poster   = Annotated[StrictStr,   AfterValidator(_check_url)]
Genres   = Annotated[List[Genre], Field(min_length=1)]


class MovieCreate(BaseModel):
    """Full movie payload. Unknown keys are ignored."""
    title:    Title
    year:     Year
    director: Director
    duration: Duration
    rate:     Rate = DEFAULT_RATE
    poster:   Poster
    genre:    Genres


class MoviePatch(BaseModel):
    """
    Partial movie payload for updates.

    Defaults are never validated, so an absent field stays unset while an
    explicit null still fails its rule.
    """
    title:    Title    = None
    year:     Year     = None
    director: Director = None
    duration: Duration = None
    rate:     Rate     = None
    poster:   Poster   = None
    genre:    Genres   = None


class Movie(MovieCreate):
    """A stored movie record."""
    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(min_length=1)
