"""
Core data models for the validation engine.

Configuration models use Pydantic for runtime validation and type safety.
"""

from .error_store import DEFAULT_END_DELIM, DEFAULT_START_DELIM, ErrorStore
from .rule_invocation import RuleInvocation, parse_checks
from .rule_spec import RuleSpec
from .validation_result import ValidationResult

__all__ = [
    "RuleInvocation",
    "RuleSpec",
    "ErrorStore",
    "ValidationResult",
    "parse_checks",
    "DEFAULT_START_DELIM",
    "DEFAULT_END_DELIM",
]
