"""
Form Coordinator

Owns the aggregate FormState: per-field values and errors plus submit
flags. Fields report changes and blurs here; submit re-validates every
field from scratch and hands the values to the submission collaborator
only when no error remains.

Error handling is intentionally asymmetric:
- set_value clears the field's error (no re-validation per keystroke)
- set_field_error_from_blur re-computes it
"""

import logging
from typing import Dict, List, Optional

from fieldkit.config.constants import MSG_REQUIRED
from fieldkit.config.settings import VERBOSE
from fieldkit.field.engine import DelegatedField, FieldConfig
from fieldkit.logic.pipeline import Validator
from fieldkit.state.form_state import FormState, create_initial_form_state, get_form_summary
from fieldkit.submission import SubmitHandler, make_submit_handler

logger = logging.getLogger(__name__)


class FormConfigError(ValueError):
    """Raised when a form is declared inconsistently."""


class FormFieldSpec:
    """Form-level registration of one field: its validator and required-ness."""

    def __init__(
        self,
        name: str,
        validator: Optional[Validator] = None,
        required: bool = False,
        required_message: str = MSG_REQUIRED,
    ):
        self.name = name
        self.validator = validator
        self.required = required
        self.required_message = required_message

    def validate(self, value: str) -> Optional[str]:
        """Run the registered validator only (blur-time rule)."""
        if self.validator is None:
            return None
        return self.validator(value)

    def validate_for_submit(self, value: str) -> Optional[str]:
        """
        Submit-time rule.

        Required: validator message if the validator rejects the value,
        otherwise the required message when the value is blank.
        Optional: the validator runs only on non-empty values.
        """
        if self.required:
            error = self.validate(value)
            if error:
                return error
            if not value.strip():
                return self.required_message
            return None

        if value:
            return self.validate(value)
        return None

    def __repr__(self) -> str:
        return f"FormFieldSpec(name={self.name!r}, required={self.required})"


def _validate_form_specs(specs: List[FormFieldSpec]) -> List[str]:
    """Validate a form declaration. Returns list of errors."""
    errors = []

    if not specs:
        errors.append("Form must define at least one field")

    names = set()
    for i, spec in enumerate(specs):
        if not spec.name:
            errors.append(f"Field {i} has no name")
        if spec.name in names:
            errors.append(f"Duplicate field name: '{spec.name}'")
        names.add(spec.name)

        if spec.validator is not None and not callable(spec.validator):
            errors.append(f"Validator for '{spec.name}' is not callable")

    return errors


class FormCoordinator:
    """
    Aggregates field values and errors and decides submit eligibility.

    Usage:
        form = FormCoordinator([
            FormFieldSpec("fullName", required=True),
            FormFieldSpec("email", validator=validate_email),
        ], submit_handler=save)
        form.set_value("fullName", "Ali")
        form.submit()
    """

    def __init__(
        self,
        fields: List[FormFieldSpec],
        submit_handler: Optional[SubmitHandler] = None,
        verbose: bool = VERBOSE,
    ):
        errors = _validate_form_specs(fields)
        if errors:
            raise FormConfigError(f"Invalid form declaration: {errors}")

        self._specs: Dict[str, FormFieldSpec] = {spec.name: spec for spec in fields}
        self._submit_handler = submit_handler or make_submit_handler(verbose=verbose)
        self.verbose = verbose

        self.state: FormState = create_initial_form_state(self._specs)

        self._field_configs: Dict[str, FieldConfig] = {}
        self._fields: Dict[str, DelegatedField] = {}

    # =========================================================================
    # State access
    # =========================================================================

    @property
    def field_names(self) -> List[str]:
        return list(self._specs)

    @property
    def values(self) -> Dict[str, str]:
        return self.state["values"]

    @property
    def errors(self) -> Dict[str, str]:
        return self.state["errors"]

    @property
    def submit_attempted(self) -> bool:
        return self.state["submit_attempted"]

    @property
    def submit_succeeded(self) -> bool:
        return self.state["submit_succeeded"]

    @property
    def fields(self) -> Dict[str, DelegatedField]:
        """Field engines bound to this form, by name."""
        return dict(self._fields)

    def get_spec(self, name: str) -> FormFieldSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise KeyError(f"Unknown field: {name}") from None

    def output(self) -> FormState:
        """Copy of the current state, safe to hand to a renderer."""
        return {
            "values": dict(self.values),
            "errors": dict(self.errors),
            "submit_attempted": self.submit_attempted,
            "submit_succeeded": self.submit_succeeded,
        }

    # =========================================================================
    # Events
    # =========================================================================

    def set_value(self, name: str, value: str):
        """Store a value, clear its error and drop any earlier submit success."""
        self.get_spec(name)

        errors = dict(self.errors)
        errors.pop(name, None)

        self.state = {
            **self.state,
            "values": {**self.values, name: value},
            "errors": errors,
            "submit_succeeded": False,
        }

        if self.verbose:
            logger.info(f"FORM | set {name} = {value!r}")

        field = self._fields.get(name)
        if field is not None:
            field.observe_external_value(value)

    def set_field_error_from_blur(self, name: str, value: str):
        """Run the field's registered validator and set or clear its error."""
        error = self.get_spec(name).validate(value)

        errors = dict(self.errors)
        if error:
            errors[name] = error
        else:
            errors.pop(name, None)

        self.state = {**self.state, "errors": errors}

        if self.verbose:
            logger.info(f"FORM | blur {name}: error={error!r}")

    def validate_all(self) -> Dict[str, str]:
        """Re-validate every field against current values, from scratch."""
        errors = {}
        for name, spec in self._specs.items():
            error = spec.validate_for_submit(self.values[name])
            if error:
                errors[name] = error
        return errors

    def submit(self) -> bool:
        """
        Re-validate all fields and hand off the values if none fails.

        Returns:
            True if the form was submitted
        """
        errors = self.validate_all()

        if errors:
            self.state = {
                **self.state,
                "errors": errors,
                "submit_attempted": True,
                "submit_succeeded": False,
            }
            logger.info(f"FORM | Submit blocked, invalid fields: {list(errors)}")
            return False

        self.state = {
            **self.state,
            "errors": {},
            "submit_attempted": True,
            "submit_succeeded": True,
        }

        if self.verbose:
            logger.info(get_form_summary(self.state))

        self._submit_handler(dict(self.values))
        return True

    def reset(self):
        """Replace the whole state with an empty one and rebuild bound fields."""
        self.state = create_initial_form_state(self._specs)
        for name in list(self._fields):
            self._fields[name] = self._create_field(self._field_configs[name])

        if self.verbose:
            logger.info("FORM | Reset")

    # =========================================================================
    # Field binding
    # =========================================================================

    def bind_field(self, config: FieldConfig) -> DelegatedField:
        """
        Create a field engine whose value lives in this form.

        The field's change and blur hooks are wired to set_value and
        set_field_error_from_blur.
        """
        self.get_spec(config.name)
        self._field_configs[config.name] = config
        field = self._create_field(config)
        self._fields[config.name] = field
        return field

    def get_field(self, name: str) -> DelegatedField:
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"No field bound for: {name}") from None

    def _create_field(self, config: FieldConfig) -> DelegatedField:
        name = config.name
        return DelegatedField(
            config,
            value_source=lambda: self.values[name],
            on_change=lambda value: self.set_value(name, value),
            on_blur=lambda value: self.set_field_error_from_blur(name, value),
            verbose=self.verbose,
        )
