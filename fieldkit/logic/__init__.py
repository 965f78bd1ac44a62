"""Validation logic: validators, input transforms and the field pipeline."""

from fieldkit.logic.pipeline import ErrorKind, FieldError, run_pipeline
from fieldkit.logic.transforms import (
    digits_only,
    phone_digits,
    resolve_transform,
    transform_for_input_type,
)
from fieldkit.logic.validators import get_validator, register_validator

__all__ = [
    "ErrorKind",
    "FieldError",
    "run_pipeline",
    "digits_only",
    "phone_digits",
    "resolve_transform",
    "transform_for_input_type",
    "get_validator",
    "register_validator",
]
