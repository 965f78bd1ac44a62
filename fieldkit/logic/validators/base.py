"""
Base Validator

Abstract base class for all field validators.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseValidator(ABC):
    """
    Abstract base class for field validators.

    All validators must implement the validate() method which returns
    an error message, or None when the value is acceptable.

    Instances are callable, so a validator can be handed directly to a
    field as its custom validator.
    """

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def validate(self, value: str, **kwargs) -> Optional[str]:
        """
        Validate a field value.

        Args:
            value: The value to validate
            **kwargs: Per-call overrides of the validator configuration

        Returns:
            Error message, or None if the value is valid.
        """
        pass

    def __call__(self, value: str) -> Optional[str]:
        return self.validate(value, **self.config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config or ''})"
