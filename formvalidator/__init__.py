"""
formvalidator - declarative validation for flat form input.
"""

from formvalidator.core.models import RuleInvocation, RuleSpec, ValidationResult
from formvalidator.core.rules import (
    ConfigurationError,
    RuleConfigBuilder,
    RuleConfigLoader,
    RuleConfigurationError,
    RuleEngine,
    RuleRegistry,
    RulesFieldsMismatchError,
    UnknownRuleError,
)
from formvalidator.core.validators import BaseValidator, ValidationError

__version__ = "0.1.0"

__all__ = [
    "RuleEngine",
    "RuleRegistry",
    "RuleSpec",
    "RuleInvocation",
    "ValidationResult",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "BaseValidator",
    "ValidationError",
    "ConfigurationError",
    "RuleConfigurationError",
    "RulesFieldsMismatchError",
    "UnknownRuleError",
]
