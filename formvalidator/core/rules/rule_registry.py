"""
Rule registry mapping rule identifiers to validator classes.
"""

from typing import Any

from formvalidator.core.models import RuleInvocation
from formvalidator.core.validators import (
    AlphaDashValidator,
    BaseValidator,
    BetweenValidator,
    DateValidator,
    EmailAddressValidator,
    IpAddressValidator,
    MaxLengthValidator,
    MinLengthValidator,
    RequiredFieldValidator,
    UrlValidator,
)

from .exceptions import RuleConfigurationError, UnknownRuleError

BUILTIN_VALIDATORS: dict[str, type[BaseValidator]] = {
    "between": BetweenValidator,
    "required": RequiredFieldValidator,
    "email": EmailAddressValidator,
    "url": UrlValidator,
    "ip": IpAddressValidator,
    "maxLength": MaxLengthValidator,
    "minLength": MinLengthValidator,
    "alphaDash": AlphaDashValidator,
    "date": DateValidator,
}


class RuleRegistry:
    """
    Resolves rule names to validator classes and runs them.

    Every dispatched rule receives the same leading arguments (field name,
    raw value, title); the invocation's own parameters follow.
    """

    def __init__(self, validators: dict[str, type[BaseValidator]] | None = None):
        self._validators: dict[str, type[BaseValidator]] = dict(validators or {})

    def register(self, name: str, validator_class: type[BaseValidator]) -> None:
        """
        Add or replace the validator for a rule name.

        Raises:
            TypeError: If validator_class is not a BaseValidator subclass
        """
        if not (isinstance(validator_class, type) and issubclass(validator_class, BaseValidator)):
            raise TypeError(f"Validator for '{name}' must subclass BaseValidator")
        self._validators[name] = validator_class

    def resolve(self, name: str) -> type[BaseValidator]:
        """
        Look up the validator class for a rule name.

        Raises:
            UnknownRuleError: If no validator is registered under the name
        """
        validator_class = self._validators.get(name)
        if validator_class is None:
            raise UnknownRuleError(name)
        return validator_class

    def build(self, invocation: RuleInvocation, field_name: str, title: str) -> BaseValidator:
        """
        Instantiate the validator for an invocation.

        Raises:
            UnknownRuleError: If the rule name is not registered
            RuleConfigurationError: If the rule rejects its parameters
        """
        validator_class = self.resolve(invocation.name)

        try:
            return validator_class(field_name, title, invocation.params)
        except ValueError as e:
            raise RuleConfigurationError(
                f"Failed to create validator for rule '{invocation.name}' on field '{field_name}': {e}"
            )

    def dispatch(self, invocation: RuleInvocation, field_name: str, value: Any, title: str) -> None:
        """
        Run one rule against a field value.

        Raises:
            ValidationError: If the value fails the rule
            UnknownRuleError / RuleConfigurationError: On configuration mistakes
        """
        self.build(invocation, field_name, title).validate(value)

    def names(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, name: str) -> bool:
        return name in self._validators


def default_registry() -> RuleRegistry:
    """A fresh registry holding the built-in rules."""
    return RuleRegistry(BUILTIN_VALIDATORS)
