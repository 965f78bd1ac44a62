"""
Shared constants used across the library.

Centralizes validation bounds and user-facing messages so validators,
the field engine and the demo form agree on them.
"""

# Phone number rules (mobile numbers: 11 digits, "09" prefix)
PHONE_LENGTH = 11
PHONE_PREFIX = "09"

# Age bounds (inclusive)
AGE_MIN = 1
AGE_MAX = 120

# Input transform names accepted by FieldConfig
TRANSFORM_NONE = "none"
TRANSFORM_DIGITS = "digits"
TRANSFORM_PHONE = "phone"

# Display states derived from a field snapshot
DISPLAY_NEUTRAL = "neutral"
DISPLAY_VALID = "valid"
DISPLAY_INVALID = "invalid"

# Messages
MSG_REQUIRED = "This field is required"
MSG_INVALID = "Invalid value"
MSG_PHONE_DIGITS = "Phone number must contain only digits"
MSG_PHONE_LENGTH = f"Phone number must be {PHONE_LENGTH} digits"
MSG_PHONE_PREFIX = f"Phone number must start with {PHONE_PREFIX}"
MSG_EMAIL = "Enter a valid email (example@domain.com)"
MSG_AGE = f"Age must be between {AGE_MIN} and {AGE_MAX}"
