"""
Input Transforms

Sanitization applied to raw input before it is stored or validated.
Transforms are destructive: rejected characters are dropped silently,
they are never reported as validation errors.
"""

import re
from typing import Callable, Dict, Union

from fieldkit.config.constants import (
    PHONE_LENGTH,
    TRANSFORM_NONE,
    TRANSFORM_DIGITS,
    TRANSFORM_PHONE,
)

InputTransform = Callable[[str], str]


def identity(value: str) -> str:
    return value


def digits_only(value: str) -> str:
    """Strip every character that is not an ASCII digit."""
    return re.sub(r"[^0-9]", "", value)


def phone_digits(value: str) -> str:
    """Digits only, truncated to the phone number length."""
    return digits_only(value)[:PHONE_LENGTH]


_TRANSFORMS: Dict[str, InputTransform] = {
    TRANSFORM_NONE: identity,
    TRANSFORM_DIGITS: digits_only,
    TRANSFORM_PHONE: phone_digits,
}


def resolve_transform(transform: Union[str, InputTransform, None]) -> InputTransform:
    """
    Resolve a transform name (or callable) to a callable.

    Raises:
        ValueError: If the name is not a known transform
    """
    if transform is None:
        return identity
    if callable(transform):
        return transform
    try:
        return _TRANSFORMS[transform]
    except KeyError:
        raise ValueError(
            f"Unknown input transform '{transform}'. Available: {sorted(_TRANSFORMS)}"
        ) from None


def transform_for_input_type(input_type: str) -> str:
    """Map a declared input type to the transform the field should use."""
    if input_type == "phone":
        return TRANSFORM_PHONE
    if input_type in ("number", "tel"):
        return TRANSFORM_DIGITS
    return TRANSFORM_NONE
