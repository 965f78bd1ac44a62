"""
Form Registry - Manages form definitions declared in code.

A FormDefinition bundles the field configurations of one form with its
form-level messages and submission action, and knows how to build a
FormCoordinator with every field bound to it.
"""

import logging
from typing import Any, Dict, List, Optional

from fieldkit.field.engine import FieldConfig
from fieldkit.form.coordinator import FormConfigError, FormCoordinator, FormFieldSpec
from fieldkit.submission import SubmitHandler, make_submit_handler

logger = logging.getLogger(__name__)


def _validate_form_definition(form_id: str, fields: List[FieldConfig], required_messages: Dict[str, str]) -> List[str]:
    """Validate a form definition. Returns list of errors."""
    errors = []

    if not form_id:
        errors.append("Form must have an id")

    if not fields:
        errors.append("Form must define at least one field")

    field_names = set()
    for field in fields:
        if field.name in field_names:
            errors.append(f"Duplicate field name: '{field.name}'")
        field_names.add(field.name)

    unknown = set(required_messages) - field_names
    if unknown:
        errors.append(f"Required messages for undeclared fields: {sorted(unknown)}")

    for name in sorted(set(required_messages) & field_names):
        if not next(f for f in fields if f.name == name).required:
            errors.append(f"Required message given for optional field: '{name}'")

    return errors


class FormDefinition:
    """Validated form definition: ordered fields plus submission settings."""

    def __init__(
        self,
        form_id: str,
        name: str,
        fields: List[FieldConfig],
        description: str = "",
        required_messages: Optional[Dict[str, str]] = None,
        submit_action: Optional[str] = None,
    ):
        required_messages = required_messages or {}
        errors = _validate_form_definition(form_id, fields, required_messages)
        if errors:
            raise FormConfigError(f"Invalid form definition '{form_id}': {errors}")

        self.id = form_id
        self.name = name
        self.description = description
        self.fields = list(fields)
        self.required_messages = dict(required_messages)
        self.submit_action = submit_action

        self.required_fields = [f for f in self.fields if f.required]
        self.optional_fields = [f for f in self.fields if not f.required]

    def get_field_by_name(self, name: str) -> Optional[FieldConfig]:
        """Get a field configuration by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def field_specs(self) -> List[FormFieldSpec]:
        """Form-level registrations derived from the field configurations."""
        return [
            FormFieldSpec(
                field.name,
                validator=field.custom_validator,
                required=field.required,
                required_message=self.required_messages.get(field.name, field.required_message),
            )
            for field in self.fields
        ]

    def create_coordinator(
        self,
        submit_handler: Optional[SubmitHandler] = None,
        verbose: bool = False,
    ) -> FormCoordinator:
        """Build a coordinator for this form with every field bound to it."""
        if submit_handler is None:
            submit_handler = make_submit_handler(self.submit_action, verbose=verbose)

        coordinator = FormCoordinator(self.field_specs(), submit_handler=submit_handler, verbose=verbose)
        for field in self.fields:
            coordinator.bind_field(field)
        return coordinator

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "field_count": len(self.fields),
            "required_field_count": len(self.required_fields),
            "optional_field_count": len(self.optional_fields),
            "fields": [
                {
                    "name": f.name,
                    "label": f.label,
                    "required": f.required,
                    "max_length": f.max_length,
                }
                for f in self.fields
            ],
        }


class FormRegistry:
    """
    Holds form definitions by id.

    Usage:
        registry = FormRegistry()
        registry.register_form(build_registration_form())
        form = registry.get_form("registration")
    """

    def __init__(self):
        self._forms: Dict[str, FormDefinition] = {}

    def register_form(self, form_def: FormDefinition) -> FormDefinition:
        """Register (or replace) a form definition."""
        if form_def.id in self._forms:
            logger.warning(f"Replacing form definition: {form_def.id}")
        self._forms[form_def.id] = form_def
        logger.info(f"Registered form: '{form_def.name}' (id={form_def.id}, fields={len(form_def.fields)})")
        return form_def

    def unregister_form(self, form_id: str) -> bool:
        """
        Remove a form from the registry.

        Returns:
            True if found and removed, False if not found
        """
        if form_id not in self._forms:
            return False
        del self._forms[form_id]
        logger.info(f"Unregistered form: {form_id}")
        return True

    def get_form(self, form_id: str) -> Optional[FormDefinition]:
        """Get a form definition by ID."""
        return self._forms.get(form_id)

    def list_forms(self) -> List[Dict[str, Any]]:
        """List all registered forms with summary info."""
        return [form.to_dict() for form in self._forms.values()]

    @property
    def form_count(self) -> int:
        return len(self._forms)

    @property
    def form_ids(self) -> List[str]:
        return list(self._forms.keys())


# Global registry instance
_global_registry: Optional[FormRegistry] = None


def get_registry() -> FormRegistry:
    """Get or create the global form registry, preloaded with built-in forms."""
    global _global_registry
    if _global_registry is None:
        from fieldkit.form.registration import build_registration_form

        _global_registry = FormRegistry()
        _global_registry.register_form(build_registration_form())
    return _global_registry
