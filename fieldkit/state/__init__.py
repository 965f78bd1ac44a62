"""State management for forms."""

from fieldkit.state.form_state import FormState, create_initial_form_state, get_form_summary

__all__ = [
    "FormState",
    "create_initial_form_state",
    "get_form_summary",
]
