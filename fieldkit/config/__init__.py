"""Configuration: environment settings and shared constants."""

from fieldkit.config.settings import (
    SUBMIT_ACTION,
    SUBMIT_WEBHOOK_TIMEOUT,
    BACKEND_PORT,
    BACKEND_HOST,
    LOG_LEVEL,
    VERBOSE,
)
from fieldkit.config.constants import (
    PHONE_LENGTH,
    PHONE_PREFIX,
    AGE_MIN,
    AGE_MAX,
    TRANSFORM_NONE,
    TRANSFORM_DIGITS,
    TRANSFORM_PHONE,
)

__all__ = [
    # Settings
    "SUBMIT_ACTION",
    "SUBMIT_WEBHOOK_TIMEOUT",
    "BACKEND_PORT",
    "BACKEND_HOST",
    "LOG_LEVEL",
    "VERBOSE",
    # Constants
    "PHONE_LENGTH",
    "PHONE_PREFIX",
    "AGE_MIN",
    "AGE_MAX",
    "TRANSFORM_NONE",
    "TRANSFORM_DIGITS",
    "TRANSFORM_PHONE",
]
