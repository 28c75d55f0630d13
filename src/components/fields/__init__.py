"""
Fields component - Profile field validation.

Length and character-set checks for free-text account fields.
"""

from .component import INPUT_VALIDATION_FAILED, is_printable_ascii, validate_field
from .models import (
    MAX_PRINTABLE,
    MIN_PRINTABLE,
    FieldErrorCode,
    FieldValidationError,
    ValidatedField,
    ValidateFieldOutput,
)
from .ports import SecurityEventPort

__all__ = [
    # Entry points
    "validate_field",
    "is_printable_ascii",
    # Models
    "FieldErrorCode",
    "FieldValidationError",
    "ValidatedField",
    "ValidateFieldOutput",
    # Constants
    "INPUT_VALIDATION_FAILED",
    "MAX_PRINTABLE",
    "MIN_PRINTABLE",
    # Ports
    "SecurityEventPort",
]
