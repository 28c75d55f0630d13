"""
Fields component - Profile field validation.

Pure functions checking free-text fields (names, addresses) before storage.

Rules (first failure wins):
1. Non-empty
2. Length strictly below max_length (capacity N holds N - 1 characters)
3. Every character printable ASCII (32..126)

Accepted values are returned untouched; bounding them into storage is the
caller's job.
"""

from __future__ import annotations

from src.core.ports.events import emit_event

from .models import (
    MAX_PRINTABLE,
    MIN_PRINTABLE,
    FieldErrorCode,
    FieldValidationError,
    ValidatedField,
    ValidateFieldOutput,
)
from .ports import SecurityEventPort

INPUT_VALIDATION_FAILED = "Input validation failed"


def is_printable_ascii(value: str) -> bool:
    """Check every character lies in the printable ASCII range."""
    return all(MIN_PRINTABLE <= ord(char) <= MAX_PRINTABLE for char in value)


def _reject(
    code: FieldErrorCode,
    message: str,
    field_name: str,
    events: SecurityEventPort | None,
) -> ValidateFieldOutput:
    emit_event(events, INPUT_VALIDATION_FAILED, f"{field_name} {message}")
    return ValidateFieldOutput(
        field=None,
        error=FieldValidationError(code=code, message=message, field=field_name),
    )


def validate_field(
    raw: str,
    max_length: int,
    field_name: str,
    events: SecurityEventPort | None = None,
) -> ValidateFieldOutput:
    """
    Validate a text field against its storage capacity and character set.

    Args:
        raw: Field value as submitted
        max_length: Storage capacity; the value must be shorter than this
        field_name: Name used in errors and events (e.g. "full_name")
        events: Optional sink notified on rejection

    Returns:
        ValidateFieldOutput with either the field or a tagged error
    """
    if not raw:
        return _reject(FieldErrorCode.EMPTY_FIELD, "cannot be empty", field_name, events)

    if len(raw) >= max_length:
        return _reject(
            FieldErrorCode.FIELD_TOO_LONG,
            f"exceeds maximum length ({max_length})",
            field_name,
            events,
        )

    if not is_printable_ascii(raw):
        return _reject(
            FieldErrorCode.INVALID_CHARACTER, "contains invalid characters", field_name, events
        )

    return ValidateFieldOutput(field=ValidatedField(field_name=field_name, value=raw))
