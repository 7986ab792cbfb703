"""
Unit tests for rule configuration loading and building.
"""

import pytest

from formvalidator.core.models import RuleInvocation
from formvalidator.core.rules import (
    RuleConfigBuilder,
    RuleConfigLoader,
    RuleConfigurationError,
    RuleEngine,
    parse_rule_config,
)


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_rules_from_yaml(self, rules_yaml):
        """Test loading rules keeps file order, titles and parameters"""
        rules = RuleConfigLoader(rules_yaml).load_rules()

        assert list(rules) == ["email", "id", "name"]
        assert rules["email"].title == "e-mail"
        assert rules["email"].rule_names() == ["required", "email"]
        assert rules["id"].checks == [RuleInvocation(name="between", params=[1, 10])]

    def test_title_defaults_to_field_name(self, rules_yaml):
        rules = RuleConfigLoader(rules_yaml).load_rules()
        assert rules["name"].title == "name"
        assert rules["name"].checks[1].params == [5]

    def test_loaded_rules_drive_engine(self, rules_yaml):
        """Test a loaded rule set can be run directly"""
        engine = RuleEngine(RuleConfigLoader(rules_yaml).load_rules())
        engine.set_fields({"email": "test@test.com", "id": 13, "name": "Joe"})

        assert engine.run() is False
        assert engine.errors == {"id": ["The id field requires a number between 1 and 10"]}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("rules: [unclosed\n")

        with pytest.raises(RuleConfigurationError, match="Invalid YAML"):
            RuleConfigLoader(path).load_rules()

    def test_missing_rules_section(self):
        with pytest.raises(RuleConfigurationError, match="'rules' section"):
            parse_rule_config({"fields": {}})

    def test_field_entry_must_be_mapping(self):
        with pytest.raises(RuleConfigurationError, match="must be a mapping"):
            parse_rule_config({"rules": {"email": ["required"]}})

    def test_malformed_checks(self):
        with pytest.raises(RuleConfigurationError, match="email"):
            parse_rule_config({"rules": {"email": {"checks": "required"}}})

    def test_field_without_checks(self):
        rules = parse_rule_config({"rules": {"comment": {"title": "Comment", "checks": None}}})
        assert rules["comment"].checks == []


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_build_rules(self):
        rules = RuleConfigBuilder() \
            .add_required("name", "Name") \
            .add_length("name", "Name", min_length=2, max_length=10) \
            .add_between("age", "age", 18, 130) \
            .add_rule("email", "e-mail", "required", "email") \
            .build()

        assert list(rules) == ["name", "age", "email"]
        assert rules["name"].rule_names() == ["required", "minLength", "maxLength"]
        assert rules["age"].checks[0].params == [18, 130]

    def test_built_rules_detached_from_builder(self):
        """Test builder calls after build() do not change a running engine"""
        builder = RuleConfigBuilder().add_required("name", "Name")
        engine = RuleEngine(builder.build())
        built = builder.build()

        builder.add_rule("name", "Name", "email")

        assert engine.rules["name"].rule_names() == ["required"]
        assert built["name"].rule_names() == ["required"]
        assert builder.build()["name"].rule_names() == ["required", "email"]

    def test_first_title_wins(self):
        rules = RuleConfigBuilder() \
            .add_required("name", "Name") \
            .add_rule("name", "Other", "alphaDash") \
            .build()

        assert rules["name"].title == "Name"

    def test_built_rules_drive_engine(self):
        engine = RuleEngine(RuleConfigBuilder().add_length("name", "name", max_length=3).build())
        engine.set_field("name", "John")

        assert engine.run() is False
        assert engine.errors["name"] == ["The name field was too long"]
