"""
Prometheus metrics collection for formvalidator

Counts validation runs, rule failures and configuration errors so a host
application can expose data-quality figures for its forms.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# Private registry so importing the package never touches the global one
REGISTRY = CollectorRegistry()


# =======================
# RUN METRICS
# =======================

validation_runs_total = Counter(
    name="formvalidator_runs_total",
    documentation="Total number of validation runs",
    labelnames=["status"],  # status: passed, failed, error
    registry=REGISTRY,
)

validation_run_duration_seconds = Histogram(
    name="formvalidator_run_duration_seconds",
    documentation="Time spent in a single validation run",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY,
)

# =======================
# RULE METRICS
# =======================

rule_failures_total = Counter(
    name="formvalidator_rule_failures_total",
    documentation="Total number of failed rule checks",
    labelnames=["rule_name", "field_name"],
    registry=REGISTRY,
)

configuration_errors_total = Counter(
    name="formvalidator_configuration_errors_total",
    documentation="Total number of runs aborted by a configuration error or a raising rule",
    labelnames=["error_type"],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for the Prometheus text exposition format"""
    return CONTENT_TYPE_LATEST


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_run_duration_seconds):
            engine.run()
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        metric = self.histogram.labels(**self.labels) if self.labels else self.histogram
        self.timer = metric.time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter, applying labels when given

    Args:
        counter: Prometheus Counter metric
        value: Amount to add
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def record_run(passed: bool) -> None:
    """Record the outcome of a completed run."""
    increment_counter(validation_runs_total, 1, status="passed" if passed else "failed")


def record_rule_failure(rule_name: str, field_name: str) -> None:
    """
    Record a failed rule check.

    Args:
        rule_name: Rule identifier that failed (e.g. "between")
        field_name: Name of field that failed validation
    """
    increment_counter(rule_failures_total, 1, rule_name=rule_name, field_name=field_name)


def record_configuration_error(error_type: str) -> None:
    """Record a run aborted by a configuration error or a raising rule."""
    increment_counter(validation_runs_total, 1, status="error")
    increment_counter(configuration_errors_total, 1, error_type=error_type)
