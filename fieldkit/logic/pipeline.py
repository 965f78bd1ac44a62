"""
Field Validation Pipeline

Runs the fixed sequence of checks for a single field value:

1. Required check (blank value on a required field)
2. Optional-and-empty short-circuit (always valid)
3. Max-length check
4. Custom validator

The first failing check wins. Validation failures are returned as
data, never raised.
"""

from enum import Enum
from typing import Callable, NamedTuple, Optional

from fieldkit.config.constants import MSG_REQUIRED, MSG_INVALID

Validator = Callable[[str], Optional[str]]


class ErrorKind(str, Enum):
    """Taxonomy of validation failures."""

    REQUIRED_MISSING = "required_missing"
    LENGTH_EXCEEDED = "length_exceeded"
    FORMAT_INVALID = "format_invalid"


class FieldError(NamedTuple):
    kind: ErrorKind
    message: str


def run_pipeline(
    value: str,
    required: bool = False,
    max_length: Optional[int] = None,
    error_message: str = MSG_INVALID,
    custom_validator: Optional[Validator] = None,
    required_message: str = MSG_REQUIRED,
) -> Optional[FieldError]:
    """
    Validate a candidate value against a field's rules.

    Returns:
        FieldError for the first failing check, or None if the value passes
    """
    if required and not value.strip():
        return FieldError(ErrorKind.REQUIRED_MISSING, required_message)

    if not value and not required:
        return None

    if max_length is not None and len(value) > max_length:
        return FieldError(ErrorKind.LENGTH_EXCEEDED, error_message)

    if custom_validator is not None:
        custom_error = custom_validator(value)
        if custom_error:
            return FieldError(ErrorKind.FORMAT_INVALID, custom_error)

    return None
