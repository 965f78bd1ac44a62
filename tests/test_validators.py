"""Tests for field validators."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fieldkit.config.constants import MSG_AGE, MSG_EMAIL, MSG_PHONE_DIGITS, MSG_PHONE_LENGTH, MSG_PHONE_PREFIX
from fieldkit.logic.validators import get_validator, register_validator, validate_phone
from fieldkit.logic.validators.age import AgeValidator
from fieldkit.logic.validators.base import BaseValidator
from fieldkit.logic.validators.email import EmailValidator
from fieldkit.logic.validators.number import NumberValidator, parse_leading_int
from fieldkit.logic.validators.phone import PhoneValidator


class TestPhoneValidator:
    def setup_method(self):
        self.v = PhoneValidator()

    def test_valid_phone(self):
        assert self.v.validate("09123456789") is None

    def test_empty_is_valid(self):
        assert self.v.validate("") is None

    def test_ten_digits(self):
        assert self.v.validate("0912345678") == MSG_PHONE_LENGTH

    def test_wrong_prefix(self):
        assert self.v.validate("19123456789") == MSG_PHONE_PREFIX

    def test_non_digit(self):
        assert self.v.validate("0912a45678b") == MSG_PHONE_DIGITS

    def test_whitespace_is_stripped(self):
        assert self.v.validate("0912 345 6789") is None

    def test_only_whitespace(self):
        assert self.v.validate("   ") == MSG_PHONE_DIGITS

    def test_persian_digits_rejected(self):
        assert self.v.validate("\u06f0\u06f9\u06f1\u06f2\u06f3\u06f4\u06f5\u06f6\u06f7\u06f8\u06f9") == MSG_PHONE_DIGITS

    def test_callable(self):
        assert self.v("0912345678") == MSG_PHONE_LENGTH
        assert validate_phone("09123456789") is None

    def test_custom_length_and_prefix(self):
        v = PhoneValidator(length=10, prefix="07")
        assert v("0712345678") is None
        assert v("0812345678") == "Phone number must start with 07"
        assert v("071234567") == "Phone number must be 10 digits"


class TestEmailValidator:
    def setup_method(self):
        self.v = EmailValidator()

    def test_valid_email(self):
        assert self.v.validate("a@b.com") is None

    def test_missing_tld(self):
        assert self.v.validate("a@b") == MSG_EMAIL

    def test_empty_is_valid(self):
        assert self.v.validate("") is None

    def test_whitespace_rejected(self):
        assert self.v.validate("a b@c.com") == MSG_EMAIL

    def test_double_at_rejected(self):
        assert self.v.validate("a@@b.com") == MSG_EMAIL

    def test_trailing_newline_rejected(self):
        assert self.v.validate("a@b.com\n") == MSG_EMAIL


class TestAgeValidator:
    def setup_method(self):
        self.v = AgeValidator()

    def test_bounds_inclusive(self):
        assert self.v.validate("1") is None
        assert self.v.validate("120") is None

    def test_out_of_range(self):
        assert self.v.validate("0") == MSG_AGE
        assert self.v.validate("121") == MSG_AGE

    def test_not_a_number(self):
        assert self.v.validate("abc") == MSG_AGE

    def test_empty_is_valid(self):
        assert self.v.validate("") is None

    def test_leading_integer_parsed(self):
        assert self.v.validate("25 years") is None

    def test_negative(self):
        assert self.v.validate("-5") == MSG_AGE

    def test_persian_digits_rejected(self):
        assert self.v.validate("\u06f2\u06f5") == MSG_AGE


class TestNumberValidator:
    def setup_method(self):
        self.v = NumberValidator()

    def test_valid_number(self):
        assert self.v.validate("25") is None

    def test_min_bound(self):
        assert self.v.validate("5", min=10) == "Value must be at least 10."

    def test_max_bound(self):
        assert self.v.validate("150", max=120) == "Value must be at most 120."

    def test_within_bounds(self):
        assert self.v.validate("25", min=13, max=120) is None

    def test_not_a_number(self):
        assert self.v.validate("x") is not None

    def test_parse_leading_int(self):
        assert parse_leading_int("42abc") == 42
        assert parse_leading_int(" -3") == -3
        assert parse_leading_int("+7") == 7
        assert parse_leading_int("abc") is None
        assert parse_leading_int("\u0662\u0665") is None


class TestGetValidator:
    def test_get_builtins(self):
        assert isinstance(get_validator("phone"), PhoneValidator)
        assert isinstance(get_validator("email"), EmailValidator)
        assert isinstance(get_validator("age"), AgeValidator)

    def test_get_unknown(self):
        assert get_validator("nonexistent") is None

    def test_builtin_names(self):
        for name in ("phone", "email", "age", "number"):
            assert get_validator(name) is not None
        assert get_validator("text") is None

    def test_register_custom(self):
        class NoSpaces(BaseValidator):
            def validate(self, value, **kwargs):
                return "No spaces allowed" if " " in value else None

        register_validator("no_spaces", NoSpaces())
        v = get_validator("no_spaces")
        assert v("a b") == "No spaces allowed"
        assert v("ab") is None
