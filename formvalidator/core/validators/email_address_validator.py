"""
EmailAddressValidator - validates e-mail address syntax.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from .base_validator import BaseValidator


class EmailAddressValidator(BaseValidator):
    """
    Validates that the trimmed value is a syntactically valid e-mail address.

    Only the address format is checked; no DNS lookup is made.
    """

    def validate(self, value: Any) -> None:
        try:
            validate_email(self.as_text(value).strip(), check_deliverability=False)
        except EmailNotValidError:
            raise self.fail(f"The {self.title} field was not a valid e-mail")

    @property
    def rule_type(self) -> str:
        return "email"
