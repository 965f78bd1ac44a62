"""
Registration Form

Demonstration form composing four fields: full name and mobile number
(required), email and age (optional).
"""

from typing import Optional

from fieldkit.config.constants import TRANSFORM_DIGITS, TRANSFORM_PHONE, PHONE_LENGTH
from fieldkit.field.engine import FieldConfig
from fieldkit.form.registry import FormDefinition
from fieldkit.logic.validators import validate_age, validate_email, validate_phone

REGISTRATION_FORM_ID = "registration"


def build_registration_form(submit_action: Optional[str] = None) -> FormDefinition:
    """Declare the registration form."""
    fields = [
        FieldConfig(
            "fullName",
            label="Full name",
            required=True,
        ),
        FieldConfig(
            "phoneNumber",
            label="Mobile number",
            required=True,
            max_length=PHONE_LENGTH,
            error_message="Invalid phone number",
            custom_validator=validate_phone,
            input_transform=TRANSFORM_PHONE,
        ),
        FieldConfig(
            "email",
            label="Email",
            error_message="Enter a valid email",
            custom_validator=validate_email,
        ),
        FieldConfig(
            "age",
            label="Age",
            max_length=3,
            error_message="Invalid age",
            custom_validator=validate_age,
            input_transform=TRANSFORM_DIGITS,
        ),
    ]

    return FormDefinition(
        REGISTRATION_FORM_ID,
        name="Registration",
        description="Full name, mobile number, email and age with inline validation",
        fields=fields,
        required_messages={
            "fullName": "Full name is required",
            "phoneNumber": "Phone number is required",
        },
        submit_action=submit_action,
    )
