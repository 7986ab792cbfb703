"""
Rule configuration management.

Loads rule sets from YAML files and provides a builder for assembling
them in code.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as ModelValidationError

from formvalidator.core.models import RuleInvocation, RuleSpec
from formvalidator.observability.logger import get_logger, log_operation

from .exceptions import RuleConfigurationError

logger = get_logger(__name__)


class RuleConfigLoader:
    """
    Loads rule sets from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      email:
        title: e-mail
        checks:
          - required
          - email

      id:
        title: id
        checks:
          - between: [1, 10]

      name:
        title: Name
        checks:
          required:
          maxLength: 40
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> dict[str, RuleSpec]:
        """
        Load and parse the rule set from the YAML file.

        Returns:
            Mapping of field name to RuleSpec, in file order, suitable for
            RuleEngine.set_rules()

        Raises:
            RuleConfigurationError: If the YAML is invalid or an entry is malformed
        """
        with log_operation("Loading rule configuration", logger=logger, path=str(self.config_path)):
            with open(self.config_path) as f:
                try:
                    config = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise RuleConfigurationError(f"Invalid YAML in {self.config_path}: {e}")

            return parse_rule_config(config)


def parse_rule_config(config: Any) -> dict[str, RuleSpec]:
    """
    Parse an already-loaded configuration document.

    Raises:
        RuleConfigurationError: If the document or any field entry is malformed
    """
    if not isinstance(config, dict) or "rules" not in config:
        raise RuleConfigurationError("Configuration must contain a 'rules' section")

    field_rules = config["rules"] or {}
    if not isinstance(field_rules, dict):
        raise RuleConfigurationError("The 'rules' section must map field names to rule entries")

    rules: dict[str, RuleSpec] = {}
    for field_name, entry in field_rules.items():
        rules[str(field_name)] = _parse_field(str(field_name), entry)

    return rules


def _parse_field(field_name: str, entry: Any) -> RuleSpec:
    """
    Parse one field entry.

    The title defaults to the field name when omitted.
    """
    if not isinstance(entry, dict):
        raise RuleConfigurationError(f"Rules for field '{field_name}' must be a mapping")

    data = dict(entry)
    if "title" not in data and "name" not in data:
        data["title"] = field_name
    if data.get("checks", data.get("rules")) is None:
        data["checks"] = []

    try:
        return RuleSpec.model_validate(data)
    except ModelValidationError as e:
        raise RuleConfigurationError(f"Invalid rules for field '{field_name}': {e}")


class RuleConfigBuilder:
    """
    Programmatically build rule sets (for testing or dynamic forms).

    Calls for the same field append to its rule list; the first call fixes
    the field's title.
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: dict[str, RuleSpec] = {}

    def add_rule(self, field_name: str, title: str, *checks: Any) -> "RuleConfigBuilder":
        """Append rules (in any form RuleInvocation.parse accepts) to a field."""
        invocations = [RuleInvocation.parse(check) for check in checks]

        if field_name in self.rules:
            self.rules[field_name].checks.extend(invocations)
        else:
            self.rules[field_name] = RuleSpec(title=title, checks=invocations)
        return self

    def add_required(self, field_name: str, title: str) -> "RuleConfigBuilder":
        """Add a required rule."""
        return self.add_rule(field_name, title, "required")

    def add_between(self, field_name: str, title: str, start: float, end: float) -> "RuleConfigBuilder":
        """Add an inclusive numeric range rule."""
        return self.add_rule(field_name, title, RuleInvocation(name="between", params=[start, end]))

    def add_length(
        self,
        field_name: str,
        title: str,
        min_length: int | None = None,
        max_length: int | None = None
    ) -> "RuleConfigBuilder":
        """Add minLength and/or maxLength rules."""
        checks = []
        if min_length is not None:
            checks.append(RuleInvocation(name="minLength", params=[min_length]))
        if max_length is not None:
            checks.append(RuleInvocation(name="maxLength", params=[max_length]))

        return self.add_rule(field_name, title, *checks)

    def build(self) -> dict[str, RuleSpec]:
        """Build and return the rule set; later builder calls do not change it."""
        return {field_name: spec.model_copy(deep=True) for field_name, spec in self.rules.items()}
