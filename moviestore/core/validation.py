# moviestore/core/validation.py
"""Full and partial validation of incoming movie payloads."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import ValidationError

from moviestore.core.models.movie import MovieCreate, MoviePatch

# (path, pydantic error type) -> message shown to the client
_MESSAGES: Dict[tuple, str] = {
    ("title", "missing"):     "Title is required",
    ("title", "string_type"): "Title must be a string",
    ("genre", "missing"):     "Genre is required",
    ("genre", "list_type"):   "Genre must be an array of enum Genre",
}


@dataclass
class ValidationResult:
    data:   Optional[Dict[str, Any]] = None
    errors: Dict[str, str]           = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors


def _field_errors(exc: ValidationError) -> Dict[str, str]:
    """Collapse pydantic errors into a {path: reason} mapping, first reason wins."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "body"
        errors.setdefault(path, _MESSAGES.get((path, err["type"]), err["msg"]))
    return errors


def validate_movie(payload: Any) -> ValidationResult:
    """
    Validate a complete movie. Every field is required except ``rate``,
    which falls back to the default. All violations are reported together.
    """
    try:
        movie = MovieCreate.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))
    return ValidationResult(data=movie.model_dump())


def validate_partial_movie(payload: Any) -> ValidationResult:
    """Validate only the fields present in ``payload``."""
    try:
        patch = MoviePatch.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))
    return ValidationResult(data=patch.model_dump(exclude_unset=True))
