"""Age Validator"""

from typing import Optional

from fieldkit.config.constants import AGE_MIN, AGE_MAX, MSG_AGE
from fieldkit.logic.validators.number import NumberValidator


class AgeValidator(NumberValidator):
    """Validates an age as an integer within [AGE_MIN, AGE_MAX]."""

    def validate(self, value: str, **kwargs) -> Optional[str]:
        return super().validate(
            value,
            min=kwargs.get("min", AGE_MIN),
            max=kwargs.get("max", AGE_MAX),
            message=kwargs.get("message", MSG_AGE),
        )
