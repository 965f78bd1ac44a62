"""
Field Validators

Provides validation for common field types.
Every validator maps a string value to an error message or None.
"""

from typing import Optional

from fieldkit.logic.validators.base import BaseValidator
from fieldkit.logic.validators.email import EmailValidator
from fieldkit.logic.validators.phone import PhoneValidator
from fieldkit.logic.validators.number import NumberValidator
from fieldkit.logic.validators.age import AgeValidator

# Registry of built-in validators
_VALIDATORS = {
    "email": EmailValidator(),
    "phone": PhoneValidator(),
    "age": AgeValidator(),
    "number": NumberValidator(),
}


def get_validator(name: str) -> Optional[BaseValidator]:
    """Get a validator by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator."""
    _VALIDATORS[name] = validator


def validate_phone(value: str) -> Optional[str]:
    return _VALIDATORS["phone"](value)


def validate_email(value: str) -> Optional[str]:
    return _VALIDATORS["email"](value)


def validate_age(value: str) -> Optional[str]:
    return _VALIDATORS["age"](value)


__all__ = [
    "BaseValidator",
    "EmailValidator",
    "PhoneValidator",
    "NumberValidator",
    "AgeValidator",
    "get_validator",
    "register_validator",
    "validate_phone",
    "validate_email",
    "validate_age",
]
