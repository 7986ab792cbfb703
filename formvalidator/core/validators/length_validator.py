"""
Length validators - bound the character length of a field value.
"""

from typing import Any

from .base_validator import BaseValidator


class LengthValidator(BaseValidator):
    """
    Shared parameter handling for the length bound rules.

    Parameters (positional):
    - length: Bound on the number of characters (non-negative integer)
    """

    param_count = 1

    def __init__(self, field_name: str, title: str, parameters: list[Any] | None = None):
        super().__init__(field_name, title, parameters)

        self.length = self.parameters[0]
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 0:
            raise ValueError(f"Length for '{self.rule_type}' must be a non-negative integer, got {self.length!r}")


class MaxLengthValidator(LengthValidator):
    """Fails when the value has more than `length` characters."""

    def validate(self, value: Any) -> None:
        if len(self.as_text(value)) > self.length:
            raise self.fail(f"The {self.title} field was too long")

    @property
    def rule_type(self) -> str:
        return "maxLength"


class MinLengthValidator(LengthValidator):
    """Fails when the value has fewer than `length` characters."""

    def validate(self, value: Any) -> None:
        if len(self.as_text(value)) < self.length:
            raise self.fail(f"The {self.title} field was too short")

    @property
    def rule_type(self) -> str:
        return "minLength"
