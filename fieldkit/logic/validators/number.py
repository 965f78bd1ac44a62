"""Number Validator"""

import re
from typing import Optional

from fieldkit.logic.validators.base import BaseValidator

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_leading_int(value: str) -> Optional[int]:
    """
    Parse the leading integer of a string, ignoring trailing characters.

    "42abc" -> 42, " -3" -> -3, "abc" -> None.
    """
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class NumberValidator(BaseValidator):
    """Validates integer values with optional min/max bounds."""

    def validate(self, value: str, **kwargs) -> Optional[str]:
        if not value:
            return None

        num = parse_leading_int(value)
        message = kwargs.get("message")

        if num is None:
            return message or "That doesn't look like a number. Please try again."

        min_val = kwargs.get("min")
        max_val = kwargs.get("max")

        if min_val is not None and num < min_val:
            return message or f"Value must be at least {min_val}."

        if max_val is not None and num > max_val:
            return message or f"Value must be at most {max_val}."

        return None
