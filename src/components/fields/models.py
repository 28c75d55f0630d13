"""
Fields component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Printable ASCII, inclusive.
MIN_PRINTABLE = 32
MAX_PRINTABLE = 126


class FieldErrorCode(str, Enum):
    """Reason a text field was rejected."""

    EMPTY_FIELD = "empty_field"
    FIELD_TOO_LONG = "field_too_long"
    INVALID_CHARACTER = "invalid_character"


@dataclass(frozen=True)
class ValidatedField:
    """A field value that passed every rule, unchanged from the input."""

    field_name: str
    value: str


@dataclass(frozen=True)
class FieldValidationError:
    """Tagged field failure."""

    code: FieldErrorCode
    message: str
    field: str


@dataclass(frozen=True)
class ValidateFieldOutput:
    """Either the validated field or the rule that rejected it."""

    field: ValidatedField | None
    error: FieldValidationError | None = None

    @property
    def success(self) -> bool:
        return self.field is not None
