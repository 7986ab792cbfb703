"""
DateValidator - validates calendar dates written as month/day/year.
"""

from datetime import datetime
from typing import Any

from .base_validator import BaseValidator

DATE_FORMAT = "%m/%d/%Y"


class DateValidator(BaseValidator):
    """
    Validates that a value is a real calendar date in MM/DD/YYYY form.

    Out-of-range parts (02/30/2012, 13/01/2012) fail rather than roll over.
    """

    def validate(self, value: Any) -> None:
        try:
            datetime.strptime(self.as_text(value), DATE_FORMAT)
        except ValueError:
            raise self.fail(f"The {self.title} field must contain a valid date")

    @property
    def rule_type(self) -> str:
        return "date"
