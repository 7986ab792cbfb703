"""
BetweenValidator - validates numeric values lie within inclusive bounds.
"""

from typing import Any

from .base_validator import BaseValidator


class BetweenValidator(BaseValidator):
    """
    Validates that a field holds a number between two inclusive bounds.

    Parameters (positional):
    - start: Lower bound (inclusive)
    - end: Upper bound (inclusive)

    Numeric strings such as "5" are accepted, since form input arrives as text.
    Anything that is not a number fails the field.
    """

    param_count = 2

    def __init__(self, field_name: str, title: str, parameters: list[Any] | None = None):
        super().__init__(field_name, title, parameters)

        self.start, self.end = self.parameters
        for bound in (self.start, self.end):
            if isinstance(bound, bool) or not isinstance(bound, int | float):
                raise ValueError(f"Bounds for 'between' must be numeric, got {type(bound).__name__}")

    def validate(self, value: Any) -> None:
        number = self._to_number(value)

        if number is None or not (self.start <= number <= self.end):
            raise self.fail(f"The {self.title} field requires a number between {self.start} and {self.end}")

    @staticmethod
    def _to_number(value: Any) -> float | None:
        """Coerce a raw value to a number, or None when it is not numeric."""
        if isinstance(value, bool):
            return None

        if isinstance(value, int | float):
            return value

        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return None

        return None

    @property
    def rule_type(self) -> str:
        return "between"
