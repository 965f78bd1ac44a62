"""Form coordination: aggregate state, form definitions and sessions."""

from fieldkit.form.coordinator import FormConfigError, FormCoordinator, FormFieldSpec
from fieldkit.form.registry import FormDefinition, FormRegistry, get_registry
from fieldkit.form.session import FormSession
from fieldkit.form.registration import REGISTRATION_FORM_ID, build_registration_form

__all__ = [
    "FormConfigError",
    "FormCoordinator",
    "FormFieldSpec",
    "FormDefinition",
    "FormRegistry",
    "get_registry",
    "FormSession",
    "REGISTRATION_FORM_ID",
    "build_registration_form",
]
