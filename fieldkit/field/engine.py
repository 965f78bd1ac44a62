"""
Field Engine

Owns the validation state of a single input: its value, whether it has
been touched (blurred at least once), its current error and character
count. Rendering is not handled here; a renderer reads snapshot() and
feeds user events back through on_change() / on_blur().

Two variants are selected at construction:
- OwnedField: keeps its own copy of the value
- DelegatedField: reads the value from an owner (normally the
  FormCoordinator) and never stores it
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, TypedDict, Union

from fieldkit.config.constants import (
    MSG_INVALID,
    MSG_REQUIRED,
    TRANSFORM_NONE,
    DISPLAY_NEUTRAL,
    DISPLAY_VALID,
    DISPLAY_INVALID,
)
from fieldkit.config.settings import VERBOSE
from fieldkit.logic.pipeline import FieldError, Validator, run_pipeline
from fieldkit.logic.transforms import (
    InputTransform,
    resolve_transform,
    transform_for_input_type,
)

logger = logging.getLogger(__name__)

ValueHook = Callable[[str], None]


class FieldConfigError(ValueError):
    """Raised when a field is configured inconsistently."""


class FieldSnapshot(TypedDict):
    """Per-render output of a field."""

    name: str
    current_value: str
    error: Optional[str]
    touched: bool
    is_valid: bool
    is_invalid: bool
    char_count: int


class FieldConfig:
    """
    Static configuration of one field.

    Args:
        name: Identifier, unique within a form
        label: Display label (defaults to name)
        required: Whether a blank value is an error
        max_length: Optional upper bound on the value length
        error_message: Message reported when max_length is exceeded
        custom_validator: Optional callable value -> error message or None
        input_transform: Transform name ("none", "digits", "phone") or callable
        required_message: Message reported for a blank required value
    """

    def __init__(
        self,
        name: str,
        label: Optional[str] = None,
        required: bool = False,
        max_length: Optional[int] = None,
        error_message: str = MSG_INVALID,
        custom_validator: Optional[Validator] = None,
        input_transform: Union[str, InputTransform, None] = TRANSFORM_NONE,
        required_message: str = MSG_REQUIRED,
    ):
        if not name:
            raise FieldConfigError("Field name must not be empty")
        if max_length is not None and max_length <= 0:
            raise FieldConfigError(f"Field '{name}': max_length must be positive, got {max_length}")
        if custom_validator is not None and not callable(custom_validator):
            raise FieldConfigError(f"Field '{name}': custom_validator must be callable")

        try:
            self._transform = resolve_transform(input_transform)
        except ValueError as e:
            raise FieldConfigError(f"Field '{name}': {e}") from None

        self.name = name
        self.label = label or name
        self.required = required
        self.max_length = max_length
        self.error_message = error_message
        self.custom_validator = custom_validator
        self.input_transform = input_transform
        self.required_message = required_message

    @classmethod
    def for_input_type(cls, name: str, input_type: str, **kwargs) -> "FieldConfig":
        """Build a config whose transform follows the declared input type."""
        kwargs.setdefault("input_transform", transform_for_input_type(input_type))
        return cls(name, **kwargs)

    def transform(self, raw_value: str) -> str:
        return self._transform(raw_value)

    def check(self, value: str) -> Optional[FieldError]:
        """Run the validation pipeline and return the structured failure."""
        return run_pipeline(
            value,
            required=self.required,
            max_length=self.max_length,
            error_message=self.error_message,
            custom_validator=self.custom_validator,
            required_message=self.required_message,
        )

    def validate(self, value: str) -> Optional[str]:
        """Run the validation pipeline and return the error message only."""
        failure = self.check(value)
        return failure.message if failure else None

    def __repr__(self) -> str:
        return f"FieldConfig(name={self.name!r}, required={self.required}, max_length={self.max_length})"


class BaseField(ABC):
    """
    Shared state machine for both field variants.

    States: pristine (untouched) -> touched-valid / touched-invalid.
    A field never returns to pristine; a form reset builds new fields.
    """

    def __init__(
        self,
        config: FieldConfig,
        on_change: Optional[ValueHook] = None,
        on_blur: Optional[ValueHook] = None,
        verbose: bool = VERBOSE,
    ):
        self.config = config
        self._on_change = on_change
        self._on_blur = on_blur
        self.verbose = verbose

        self.touched = False
        self.error: Optional[str] = None
        self.char_count = 0

    @property
    def name(self) -> str:
        return self.config.name

    @property
    @abstractmethod
    def value(self) -> str:
        """Current value of the field."""

    @abstractmethod
    def _store(self, value: str):
        """Persist a new candidate value (no-op when the value is delegated)."""

    def validate(self, value: str) -> Optional[str]:
        return self.config.validate(value)

    def on_change(self, raw_value: str) -> str:
        """
        Handle an input change.

        Sanitizes the raw input, stores it (owned fields only), re-validates
        and notifies the parent. Does not mark the field as touched.

        Returns:
            The sanitized candidate value
        """
        candidate = self.config.transform(raw_value)
        self._store(candidate)
        self.char_count = len(candidate)
        self.error = self.validate(candidate)

        if self.verbose:
            logger.info(f"FIELD | {self.name} change: {candidate!r} (error={self.error!r})")

        if self._on_change:
            self._on_change(candidate)
        return candidate

    def on_blur(self, current_value: Optional[str] = None):
        """Handle focus loss: mark touched, re-validate and notify the parent."""
        if current_value is None:
            current_value = self.value

        self.touched = True
        self.error = self.validate(current_value)

        if self.verbose:
            logger.info(f"FIELD | {self.name} blur: {current_value!r} (error={self.error!r})")

        if self._on_blur:
            self._on_blur(current_value)

    @property
    def is_invalid(self) -> bool:
        return self.touched and self.error is not None

    @property
    def is_valid(self) -> bool:
        return self.touched and self.error is None and len(self.value) > 0

    def display_state(self) -> str:
        """Tri-state for renderers: never "valid" for untouched, empty or failing fields."""
        if self.is_invalid:
            return DISPLAY_INVALID
        if self.is_valid:
            return DISPLAY_VALID
        return DISPLAY_NEUTRAL

    def snapshot(self) -> FieldSnapshot:
        return {
            "name": self.name,
            "current_value": self.value,
            "error": self.error,
            "touched": self.touched,
            "is_valid": self.is_valid,
            "is_invalid": self.is_invalid,
            "char_count": self.char_count,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, touched={self.touched}, error={self.error!r})"


class OwnedField(BaseField):
    """Field that keeps its own value."""

    def __init__(self, config: FieldConfig, initial_value: str = "", **kwargs):
        super().__init__(config, **kwargs)
        self._value = initial_value
        self.char_count = len(initial_value)

    @property
    def value(self) -> str:
        return self._value

    def _store(self, value: str):
        self._value = value


class DelegatedField(BaseField):
    """Field whose value is owned elsewhere and read through value_source."""

    def __init__(self, config: FieldConfig, value_source: Callable[[], str], **kwargs):
        super().__init__(config, **kwargs)
        self._value_source = value_source
        self.char_count = len(self.value)

    @property
    def value(self) -> str:
        return self._value_source()

    def _store(self, value: str):
        pass

    def observe_external_value(self, new_value: str):
        """
        React to the owner changing the value.

        Errors are only recomputed once the field has been touched, so an
        untouched field never surfaces an error.
        """
        self.char_count = len(new_value)
        if self.touched:
            self.error = self.validate(new_value)


def create_field(
    config: FieldConfig,
    value_source: Optional[Callable[[], str]] = None,
    initial_value: str = "",
    **kwargs,
) -> BaseField:
    """Create a DelegatedField when a value source is given, else an OwnedField."""
    if value_source is not None:
        return DelegatedField(config, value_source, **kwargs)
    return OwnedField(config, initial_value=initial_value, **kwargs)
