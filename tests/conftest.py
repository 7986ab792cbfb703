"""
Pytest configuration and fixtures for formvalidator tests

This module provides shared fixtures for unit tests.
"""
import pytest

from formvalidator.core.rules import RuleEngine


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture(scope="function")
def engine() -> RuleEngine:
    """
    Fresh rule engine with the built-in rules

    Returns:
        RuleEngine with no rules or fields configured
    """
    return RuleEngine()


@pytest.fixture(scope="function")
def signup_engine() -> RuleEngine:
    """
    Engine configured like a small sign-up form

    Returns:
        RuleEngine with rules for name, email and age but no field values
    """
    engine = RuleEngine()
    engine.set_rule("name", "Name", ["required", "alphaDash", {"maxLength": 10}])
    engine.set_rule("email", "e-mail", ["required", "email"])
    engine.set_rule("age", "age", [{"between": [18, 130]}])
    return engine


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="function")
def rules_yaml(tmp_path) -> str:
    """
    Write a rule configuration file for loader tests

    Returns:
        Path to the YAML file
    """
    path = tmp_path / "rules.yaml"
    path.write_text(
        "rules:\n"
        "  email:\n"
        "    title: e-mail\n"
        "    checks:\n"
        "      - required\n"
        "      - email\n"
        "  id:\n"
        "    title: id\n"
        "    checks:\n"
        "      - between: [1, 10]\n"
        "  name:\n"
        "    checks:\n"
        "      required:\n"
        "      maxLength: 5\n"
    )
    return str(path)
