"""
RequiredFieldValidator - ensures a field holds a non-blank value.
"""

from typing import Any

from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is not null/empty.

    Fails if:
    - Field value is None
    - Field value is empty or whitespace-only once converted to text
    """

    def validate(self, value: Any) -> None:
        if self.as_text(value).strip() == "":
            raise self.fail(f"The {self.title} field is required")

    @property
    def rule_type(self) -> str:
        return "required"
