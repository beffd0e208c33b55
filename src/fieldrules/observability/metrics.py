"""
Prometheus metrics collection for fieldrules

This module provides metrics instrumentation for monitoring validation
runs, rule failures and engine faults.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Registry private to the engine so embedding applications choose what to expose
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Validation runs counter
validations_total = Counter(
    name="fieldrules_validations_total",
    documentation="Total number of validation runs",
    labelnames=["status"],  # status: passed, failed, error
    registry=REGISTRY,
)

# Rule failures counter
rule_failures_total = Counter(
    name="fieldrules_rule_failures_total",
    documentation="Total number of failed rule evaluations",
    labelnames=["rule"],
    registry=REGISTRY,
)

# Rule faults counter (exceptions caught at the rule boundary)
rule_faults_total = Counter(
    name="fieldrules_rule_faults_total",
    documentation="Total number of rule evaluations that raised internally",
    labelnames=["rule"],
    registry=REGISTRY,
)

# Validation duration histogram
validation_duration_seconds = Histogram(
    name="fieldrules_validation_duration_seconds",
    documentation="Time spent validating one request in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
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


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds):
            ...
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
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_validation_run(status: str) -> None:
    """Record one validation run with its final status (passed, failed, error)."""
    increment_counter(validations_total, 1, status=status)


def record_rule_failure(rule: str) -> None:
    """Record a failed rule evaluation."""
    increment_counter(rule_failures_total, 1, rule=rule)


def record_rule_fault(rule: str) -> None:
    """Record a rule evaluation that raised and was converted to a failure."""
    increment_counter(rule_faults_total, 1, rule=rule)
