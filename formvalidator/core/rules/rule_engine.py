"""
Rule engine for validating a set of named field values.

The rule engine holds the configured rules and field values, runs every
rule against its field and collects the resulting error messages.
"""

from collections.abc import Mapping
from typing import Any

from formvalidator.core.models import (
    DEFAULT_END_DELIM,
    DEFAULT_START_DELIM,
    ErrorStore,
    RuleSpec,
    ValidationResult,
)
from formvalidator.core.validators import BaseValidator, ValidationError
from formvalidator.observability.logger import get_logger
from formvalidator.observability.metrics import (
    record_configuration_error,
    record_rule_failure,
    record_run,
    track_duration,
    validation_run_duration_seconds,
)
from formvalidator.utils.validation import is_field_mapping, is_field_name, is_scalar_value

from .exceptions import RulesFieldsMismatchError
from .rule_registry import RuleRegistry, default_registry

logger = get_logger(__name__)


class RuleEngine:
    """
    Validates field values against per-field rule lists.

    Typical use:
        engine = RuleEngine()
        engine.set_rule("email", "e-mail", ["required", "email"])
        engine.set_field("email", request_params["email"])
        if not engine.run():
            html = engine.all_errors()

    Setters never raise on malformed input: they return False and keep the
    previous state. run() resets the errors of any earlier run before
    validating, so results never leak between runs.

    An engine instance is not safe to share between threads during a run.
    """

    def __init__(
        self,
        rules: Mapping[str, Any] | None = None,
        registry: RuleRegistry | None = None,
    ):
        """
        Initialize the rule engine.

        Args:
            rules: Optional initial rule set, as accepted by set_rules()
            registry: Rule registry to dispatch through (built-in rules by default)
        """
        self.registry = registry or default_registry()
        self._rules: dict[str, RuleSpec] = {}
        self._fields: dict[str, Any] = {}
        self._errors = ErrorStore()
        self._checked_fields: list[str] = []

        if rules is not None:
            self.set_rules(rules)

    # =======================
    # CONFIGURATION
    # =======================

    def set_rules(self, rules: Mapping[str, Any]) -> bool:
        """
        Replace the entire rule set.

        Args:
            rules: Mapping of field name to a RuleSpec, a {"title", "checks"}
                   mapping or a (title, checks) pair

        Returns:
            True if the rule set was replaced, False if the input was rejected
        """
        if not isinstance(rules, Mapping):
            logger.debug("Ignoring rule set that is not a mapping", extra={"rules_type": type(rules).__name__})
            return False

        parsed: dict[str, RuleSpec] = {}
        for field_name, spec in rules.items():
            rule_spec = self._to_rule_spec(field_name, spec)
            if rule_spec is None:
                return False
            parsed[field_name] = rule_spec

        self._rules = parsed
        return True

    def set_rule(self, field_name: str, title: str, checks: Any = ()) -> bool:
        """
        Add or replace the rules for a single field.

        Args:
            field_name: Field the rules apply to
            title: Display name used in error messages
            checks: Ordered rule forms, e.g. ["required", {"maxLength": 10}]

        Returns:
            True if the rule entry was stored, False if the input was rejected
        """
        rule_spec = self._to_rule_spec(field_name, (title, checks))
        if rule_spec is None:
            return False

        self._rules[field_name] = rule_spec
        return True

    def set_fields(self, fields: Mapping[str, Any]) -> bool:
        """
        Replace all field values.

        Returns:
            True if the values were replaced, False if the input was rejected
        """
        if not is_field_mapping(fields):
            logger.debug("Ignoring malformed field mapping", extra={"fields_type": type(fields).__name__})
            return False

        self._fields = dict(fields)
        return True

    def set_field(self, field_name: str, value: Any = None) -> bool:
        """
        Set or replace a single field value.

        Returns:
            True if the value was stored, False if the input was rejected
        """
        if not (is_field_name(field_name) and is_scalar_value(value)):
            logger.debug("Ignoring malformed field value", extra={"field_name": repr(field_name)})
            return False

        self._fields[field_name] = value
        return True

    def register_rule(self, name: str, validator_class: type[BaseValidator]) -> None:
        """Register an extra rule on this engine's registry."""
        self.registry.register(name, validator_class)

    def _to_rule_spec(self, field_name: Any, spec: Any) -> RuleSpec | None:
        """Coerce one rule entry to a RuleSpec, or None if it is malformed."""
        if not is_field_name(field_name):
            logger.debug("Ignoring rules for invalid field name", extra={"field_name": repr(field_name)})
            return None

        try:
            if isinstance(spec, RuleSpec):
                return spec.model_copy(deep=True)
            if isinstance(spec, Mapping):
                return RuleSpec.model_validate(spec)
            if isinstance(spec, tuple) and len(spec) == 2:
                title, checks = spec
                return RuleSpec(title=title, checks=checks)
        except ValueError as e:
            logger.debug("Ignoring malformed rules", extra={"field_name": field_name, "reason": str(e)})
            return None

        logger.debug("Ignoring unsupported rule entry", extra={"field_name": field_name})
        return None

    # =======================
    # EXECUTION
    # =======================

    def run(self) -> bool:
        """
        Validate every configured field, populating the error store.

        Returns:
            True if no rule failed

        Raises:
            RulesFieldsMismatchError: If a field with rules has no value
            UnknownRuleError: If a rule name is not registered
            RuleConfigurationError: If a rule rejects its parameters
            Exception: Anything else a registered rule raises; the run is discarded
        """
        self._errors.clear()
        self._checked_fields = []

        logger.debug("Starting validation run", extra={"rule_fields": list(self._rules)})

        try:
            with track_duration(validation_run_duration_seconds):
                self._check_fields_present()
                for field_name, rule_spec in self._rules.items():
                    self._validate_field(field_name, rule_spec)
                    self._checked_fields.append(field_name)
        except Exception as e:
            # A run is all-or-nothing; drop anything recorded before the abort,
            # whether a configuration error or a registered rule raising
            self._errors.clear()
            self._checked_fields = []
            record_configuration_error(type(e).__name__)
            logger.error(f"Validation run aborted: {e}", extra={"error_type": type(e).__name__})
            raise

        passed = self.passed()
        record_run(passed)
        logger.debug(
            "Completed validation run",
            extra={"passed": passed, "error_count": self.count_errors()}
        )
        return passed

    def _check_fields_present(self) -> None:
        for field_name in self._rules:
            if field_name not in self._fields:
                raise RulesFieldsMismatchError(field_name)

    def _validate_field(self, field_name: str, rule_spec: RuleSpec) -> None:
        """Run every rule for one field, recording each failure."""
        value = self._fields[field_name]

        for invocation in rule_spec.checks:
            try:
                self.registry.dispatch(invocation, field_name, value, rule_spec.title)
            except ValidationError as e:
                self._errors.add(field_name, e.message)
                record_rule_failure(e.rule_name, field_name)

    # =======================
    # READ ACCESSORS
    # =======================

    @property
    def rules(self) -> dict[str, RuleSpec]:
        return {field_name: spec.model_copy(deep=True) for field_name, spec in self._rules.items()}

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    @property
    def errors(self) -> dict[str, list[str]]:
        return self._errors.as_dict()

    def count_errors(self) -> int:
        """Number of fields with at least one error."""
        return self._errors.count()

    def passed(self) -> bool:
        return self._errors.is_empty()

    def result(self) -> ValidationResult:
        """Snapshot of the latest run."""
        return ValidationResult(
            passed=self.passed(),
            errors=self.errors,
            checked_fields=list(self._checked_fields),
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of configured rules.

        Returns:
            Dictionary with field and rule counts
        """
        rules_by_type: dict[str, int] = {}
        for rule_spec in self._rules.values():
            for name in rule_spec.rule_names():
                rules_by_type[name] = rules_by_type.get(name, 0) + 1

        return {
            "total_fields": len(self._rules),
            "total_rules": sum(rules_by_type.values()),
            "rules_by_type": rules_by_type,
            "registered_rules": self.registry.names(),
        }

    # =======================
    # FORMATTED ERRORS
    # =======================

    def first_field_error(
        self, field_name: str, start_delim: str = DEFAULT_START_DELIM, end_delim: str = DEFAULT_END_DELIM
    ) -> str:
        return self._errors.first_field_error(field_name, start_delim, end_delim)

    def all_field_errors(
        self, field_name: str, start_delim: str = DEFAULT_START_DELIM, end_delim: str = DEFAULT_END_DELIM
    ) -> str:
        return self._errors.all_field_errors(field_name, start_delim, end_delim)

    def all_first_errors(self, start_delim: str = DEFAULT_START_DELIM, end_delim: str = DEFAULT_END_DELIM) -> str:
        return self._errors.all_first_errors(start_delim, end_delim)

    def all_errors(self, start_delim: str = DEFAULT_START_DELIM, end_delim: str = DEFAULT_END_DELIM) -> str:
        return self._errors.all_errors(start_delim, end_delim)

    # =======================
    # FIELD REPOPULATION
    # =======================

    def repopulate(self, field_name: str) -> str:
        """
        Last value set for a field, as text for redisplay in a form.

        Returns "" when the field was never set or holds None.
        """
        value = self._fields.get(field_name)
        return "" if value is None else str(value)
