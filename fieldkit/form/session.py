"""
Form Session

One live instance of a form: a coordinator plus the field engines bound
to it. Renderers (or the HTTP backend) drive a session with change,
blur, submit and reset events and read snapshot() back.
"""

import uuid
from typing import Any, Dict, Optional

from fieldkit.field.engine import FieldSnapshot
from fieldkit.form.registry import FormDefinition
from fieldkit.submission import SubmitHandler


class FormSession:
    """Live form instance driven by user events."""

    def __init__(
        self,
        form_def: FormDefinition,
        session_id: Optional[str] = None,
        submit_handler: Optional[SubmitHandler] = None,
        verbose: bool = False,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.form_def = form_def
        self.coordinator = form_def.create_coordinator(submit_handler=submit_handler, verbose=verbose)

    @property
    def form_id(self) -> str:
        return self.form_def.id

    def change(self, field_name: str, raw_value: str) -> str:
        """Feed a raw input change to a field. Returns the sanitized value."""
        return self.coordinator.get_field(field_name).on_change(raw_value)

    def blur(self, field_name: str, value: Optional[str] = None):
        """Feed a focus loss to a field (defaults to the field's current value)."""
        self.coordinator.get_field(field_name).on_blur(value)

    def submit(self) -> bool:
        return self.coordinator.submit()

    def reset(self):
        self.coordinator.reset()

    def field_snapshots(self) -> Dict[str, FieldSnapshot]:
        return {name: field.snapshot() for name, field in self.coordinator.fields.items()}

    def snapshot(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "form_id": self.form_id,
            **self.coordinator.output(),
            "fields": self.field_snapshots(),
        }
