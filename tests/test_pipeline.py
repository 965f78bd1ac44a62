"""Tests for the field validation pipeline and input transforms."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from fieldkit.config.constants import MSG_REQUIRED
from fieldkit.logic.pipeline import ErrorKind, FieldError, run_pipeline
from fieldkit.logic.transforms import (
    digits_only,
    identity,
    phone_digits,
    resolve_transform,
    transform_for_input_type,
)


def _always_fail(value):
    return "custom failure"


class TestRequired:
    @pytest.mark.parametrize("value", ["", " ", "\t\n"])
    def test_blank_required_value(self, value):
        result = run_pipeline(value, required=True, max_length=1, custom_validator=_always_fail)
        assert result == FieldError(ErrorKind.REQUIRED_MISSING, MSG_REQUIRED)

    def test_custom_required_message(self):
        result = run_pipeline("", required=True, required_message="Name is required")
        assert result.message == "Name is required"


class TestOptionalEmpty:
    def test_empty_optional_short_circuits(self):
        assert run_pipeline("", max_length=0, custom_validator=_always_fail) is None

    def test_whitespace_optional_is_checked(self):
        result = run_pipeline("  ", custom_validator=_always_fail)
        assert result.kind is ErrorKind.FORMAT_INVALID


class TestOrdering:
    def test_length_before_custom(self):
        result = run_pipeline("abcd", max_length=3, error_message="too long", custom_validator=_always_fail)
        assert result == FieldError(ErrorKind.LENGTH_EXCEEDED, "too long")

    def test_length_at_bound_passes(self):
        assert run_pipeline("abc", max_length=3) is None

    def test_custom_validator(self):
        result = run_pipeline("abc", custom_validator=_always_fail)
        assert result == FieldError(ErrorKind.FORMAT_INVALID, "custom failure")

    def test_valid(self):
        assert run_pipeline("abc", required=True, max_length=5, custom_validator=lambda v: None) is None

    def test_idempotent(self):
        first = run_pipeline("abcd", max_length=3)
        second = run_pipeline("abcd", max_length=3)
        assert first == second


class TestTransforms:
    def test_digits_only(self):
        assert digits_only("0912a45678b") == "091245678"

    def test_digits_only_drops_non_ascii_digits(self):
        assert digits_only("\u06f2\u06f5") == ""
        assert digits_only("2\u06655") == "25"

    def test_phone_truncates(self):
        assert phone_digits("0912-345-6789-99") == "09123456789"

    def test_resolve_names(self):
        assert resolve_transform("digits") is digits_only
        assert resolve_transform("phone") is phone_digits
        assert resolve_transform("none") is identity
        assert resolve_transform(None) is identity

    def test_resolve_callable(self):
        assert resolve_transform(str.upper)("ab") == "AB"

    def test_resolve_unknown(self):
        with pytest.raises(ValueError):
            resolve_transform("uppercase")

    def test_input_type_mapping(self):
        assert transform_for_input_type("number") == "digits"
        assert transform_for_input_type("tel") == "digits"
        assert transform_for_input_type("phone") == "phone"
        assert transform_for_input_type("email") == "none"
