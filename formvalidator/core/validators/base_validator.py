"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class ValidationError(Exception):
    """Raised when a validation rule fails."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one named rule (between, required, email, ...).
    It is built with the fixed prefix every rule receives (field name and
    title) followed by the rule-specific parameters in declaration order.
    """

    # Number of positional parameters the rule expects
    param_count = 0

    def __init__(self, field_name: str, title: str, parameters: Sequence[Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate
            title: Display name used in error messages
            parameters: Rule-specific parameters (e.g., start/end for between)

        Raises:
            ValueError: If the number of parameters does not match the rule
        """
        self.field_name = field_name
        self.title = title
        self.parameters = list(parameters or [])

        if len(self.parameters) != self.param_count:
            raise ValueError(
                f"Rule '{self.rule_type}' expects {self.param_count} parameter(s), "
                f"got {len(self.parameters)}"
            )

    @abstractmethod
    def validate(self, value: Any) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The raw field value

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule identifier."""
        pass

    def fail(self, message: str) -> ValidationError:
        """Build the ValidationError for this rule and field."""
        return ValidationError(rule_name=self.rule_type, field_name=self.field_name, message=message)

    @staticmethod
    def as_text(value: Any) -> str:
        """Render a raw value as the string the text-based rules inspect."""
        return "" if value is None else str(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
