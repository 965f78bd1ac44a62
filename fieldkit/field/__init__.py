"""Field engine: per-input value, touched and error state."""

from fieldkit.field.engine import (
    FieldConfig,
    FieldConfigError,
    FieldSnapshot,
    BaseField,
    OwnedField,
    DelegatedField,
    create_field,
)

__all__ = [
    "FieldConfig",
    "FieldConfigError",
    "FieldSnapshot",
    "BaseField",
    "OwnedField",
    "DelegatedField",
    "create_field",
]
