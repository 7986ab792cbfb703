"""
Configuration errors raised by the rule engine.

These signal a caller mistake (bad rule set, missing field) and abort a run.
They are never recorded as validation messages.
"""


class ConfigurationError(ValueError):
    """Base class for fatal rule/field configuration problems."""


class UnknownRuleError(ConfigurationError):
    """Raised when a rule name has no registered validator."""

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Unknown rule: {rule_name}")


class RuleConfigurationError(ConfigurationError):
    """Raised when a known rule is configured with unusable parameters, or a rules document is malformed."""


class RulesFieldsMismatchError(ConfigurationError):
    """Raised when a field has rules but no value was supplied for it."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Mismatch between rules and fields at rule: {field_name}")
