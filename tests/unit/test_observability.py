"""
Unit tests for logging and metrics instrumentation.
"""

import json
import logging

import pytest

from formvalidator.core.rules import RuleEngine, RulesFieldsMismatchError
from formvalidator.observability.logger import get_logger, log_operation, setup_logger
from formvalidator.observability.metrics import REGISTRY, generate_metrics, get_content_type


def sample(name: str, labels: dict | None = None) -> float:
    """Current value of a metric sample, 0 when never observed."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetrics:
    """Tests for validation metrics"""

    def test_run_outcomes_counted(self):
        engine = RuleEngine()
        engine.set_rule("name", "Name", ["required"])

        passed_before = sample("formvalidator_runs_total", {"status": "passed"})
        failed_before = sample("formvalidator_runs_total", {"status": "failed"})

        engine.set_field("name", "Joe")
        engine.run()
        engine.set_field("name", "")
        engine.run()

        assert sample("formvalidator_runs_total", {"status": "passed"}) == passed_before + 1
        assert sample("formvalidator_runs_total", {"status": "failed"}) == failed_before + 1

    def test_rule_failures_counted(self):
        labels = {"rule_name": "required", "field_name": "metrics_name"}
        before = sample("formvalidator_rule_failures_total", labels)

        engine = RuleEngine()
        engine.set_rule("metrics_name", "Name", ["required"])
        engine.set_field("metrics_name", "")
        engine.run()

        assert sample("formvalidator_rule_failures_total", labels) == before + 1

    def test_configuration_errors_counted(self):
        labels = {"error_type": "RulesFieldsMismatchError"}
        before = sample("formvalidator_configuration_errors_total", labels)

        engine = RuleEngine()
        engine.set_rule("name", "Name", ["required"])
        with pytest.raises(RulesFieldsMismatchError):
            engine.run()

        assert sample("formvalidator_configuration_errors_total", labels) == before + 1

    def test_run_duration_observed(self):
        before = sample("formvalidator_run_duration_seconds_count")
        RuleEngine().run()
        assert sample("formvalidator_run_duration_seconds_count") == before + 1

    def test_generate_metrics(self):
        RuleEngine().run()
        assert b"formvalidator_runs_total" in generate_metrics()
        assert get_content_type().startswith("text/plain")


class TestLogger:
    """Tests for structured logging setup"""

    def test_setup_logger_level_and_handler(self):
        logger = setup_logger("formvalidator.test.level", level="DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        logger = setup_logger("formvalidator.test.env")
        assert logger.level == logging.WARNING

    def test_get_logger_reuses_handlers(self):
        first = get_logger("formvalidator.test.reuse")
        second = get_logger("formvalidator.test.reuse")

        assert first is second
        assert len(second.handlers) == 1

    def test_json_output(self, capsys):
        logger = setup_logger("formvalidator.test.json", level="INFO", format_type="json")
        logger.info("hello", extra={"field_name": "email"})

        record = json.loads(capsys.readouterr().out.strip())
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["logger"] == "formvalidator.test.json"
        assert record["field_name"] == "email"

    def test_log_operation_reraises(self, capsys):
        logger = setup_logger("formvalidator.test.operation", level="INFO", format_type="json")

        with pytest.raises(RuntimeError):
            with log_operation("Loading rules", logger=logger, path="rules.yaml"):
                raise RuntimeError("boom")

        lines = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        assert lines[0]["message"] == "Starting: Loading rules"
        assert lines[-1]["status"] == "error"
        assert lines[-1]["error_type"] == "RuntimeError"
