"""
RegexValidator - validates field values against a fixed regular expression.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Base for rules that accept a value when it fully matches a pattern.

    Subclasses set `pattern` and `message_template`; the template is
    formatted with the field title.
    """

    pattern: Pattern
    message_template: str

    def validate(self, value: Any) -> None:
        if not self.pattern.fullmatch(self.as_text(value)):
            raise self.fail(self.message_template.format(title=self.title))


class AlphaDashValidator(RegexValidator):
    """Validates that a value is non-empty and only holds ASCII letters, '-' and '_'."""

    pattern = re.compile(r"[a-z_\-]+", re.IGNORECASE | re.ASCII)
    message_template = "The {title} field must contain only alpha and dash characters"

    @property
    def rule_type(self) -> str:
        return "alphaDash"
