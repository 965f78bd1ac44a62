"""Phone Validator"""

import re
from typing import Optional

from fieldkit.config.constants import PHONE_LENGTH, PHONE_PREFIX, MSG_PHONE_DIGITS
from fieldkit.logic.validators.base import BaseValidator


class PhoneValidator(BaseValidator):
    """Validates mobile numbers: digits only, fixed length, fixed prefix."""

    def validate(self, value: str, **kwargs) -> Optional[str]:
        if not value:
            return None

        phone = re.sub(r"\s", "", value)

        length = kwargs.get("length", PHONE_LENGTH)
        prefix = kwargs.get("prefix", PHONE_PREFIX)

        if not re.fullmatch(r"[0-9]+", phone):
            return MSG_PHONE_DIGITS

        if len(phone) != length:
            return f"Phone number must be {length} digits"

        if not phone.startswith(prefix):
            return f"Phone number must start with {prefix}"

        return None
