"""Email Validator"""

import re
from typing import Optional

from fieldkit.config.constants import MSG_EMAIL
from fieldkit.logic.validators.base import BaseValidator


class EmailValidator(BaseValidator):
    """Validates email addresses of the form local@domain.tld."""

    EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    def validate(self, value: str, **kwargs) -> Optional[str]:
        if not value:
            return None

        if not self.EMAIL_PATTERN.fullmatch(value):
            return MSG_EMAIL

        return None
