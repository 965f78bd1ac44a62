"""
FormState - Aggregate state of a form.

Tracks every declared field's value, the current per-field errors and
the outcome of submit attempts. The whole state is replaced atomically
on reset.
"""

from typing import Dict, Iterable, TypedDict


class FormState(TypedDict):
    """
    Complete state of one form.

    - values: field name -> value, in field declaration order
    - errors: field name -> error message; absent means currently valid
    - submit_attempted / submit_succeeded: outcome flags
    """

    values: Dict[str, str]
    """Current field values (all declared fields present)"""

    errors: Dict[str, str]
    """Field-specific validation errors (field_name -> error_message)"""

    submit_attempted: bool
    """True after the first submit, regardless of outcome"""

    submit_succeeded: bool
    """True only right after a submit with zero errors"""


def create_initial_form_state(field_names: Iterable[str]) -> FormState:
    """
    Creates an empty FormState for the given fields.

    Args:
        field_names: Declared field names, in order

    Returns:
        FormState: All values empty, no errors, no submit attempted
    """
    return {
        "values": {name: "" for name in field_names},
        "errors": {},
        "submit_attempted": False,
        "submit_succeeded": False,
    }


def get_form_summary(state: FormState) -> str:
    """
    Get a human-readable summary of the form state.
    Useful for debugging and logging.
    """
    values = state.get("values", {})
    filled = len([v for v in values.values() if v])

    return f"""
Form Summary
============
Filled Fields: {filled}/{len(values)}
Validation Errors: {list(state.get('errors', {}).keys())}
Submit Attempted: {state.get('submit_attempted')}
Submit Succeeded: {state.get('submit_succeeded')}
    """.strip()
