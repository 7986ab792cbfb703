"""
Rule registry, execution engine and configuration management.
"""

from .exceptions import (
    ConfigurationError,
    RuleConfigurationError,
    RulesFieldsMismatchError,
    UnknownRuleError,
)
from .rule_config import RuleConfigBuilder, RuleConfigLoader, parse_rule_config
from .rule_engine import RuleEngine
from .rule_registry import BUILTIN_VALIDATORS, RuleRegistry, default_registry

__all__ = [
    "RuleEngine",
    "RuleRegistry",
    "default_registry",
    "BUILTIN_VALIDATORS",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "parse_rule_config",
    "ConfigurationError",
    "RuleConfigurationError",
    "RulesFieldsMismatchError",
    "UnknownRuleError",
]
