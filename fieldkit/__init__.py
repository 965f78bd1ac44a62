"""
fieldkit

Headless form-field validation: a per-input field engine with inline,
real-time validation and a form coordinator that decides submission.
"""

from fieldkit.field.engine import FieldConfig, OwnedField, DelegatedField, create_field
from fieldkit.form.coordinator import FormCoordinator, FormFieldSpec
from fieldkit.form.registry import FormDefinition, FormRegistry, get_registry
from fieldkit.form.session import FormSession
from fieldkit.state.form_state import FormState, create_initial_form_state

__all__ = [
    "FieldConfig",
    "OwnedField",
    "DelegatedField",
    "create_field",
    "FormCoordinator",
    "FormFieldSpec",
    "FormDefinition",
    "FormRegistry",
    "get_registry",
    "FormSession",
    "FormState",
    "create_initial_form_state",
]
