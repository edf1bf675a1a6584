"""
Prometheus metrics collection for pwpolicy

Counts password checks and rule violations so operators can see which
requirements users trip over most often.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# Password checks counter
password_checks_total = Counter(
    name="pwpolicy_password_checks_total",
    documentation="Total number of passwords evaluated against a policy",
    labelnames=["result"],  # result: valid, invalid
    registry=REGISTRY,
)

# Rule violations counter
rule_violations_total = Counter(
    name="pwpolicy_rule_violations_total",
    documentation="Total number of rule violations",
    labelnames=["placeholder"],
    registry=REGISTRY,
)

# Evaluation duration histogram
evaluation_duration_seconds = Histogram(
    name="pwpolicy_evaluation_duration_seconds",
    documentation="Time spent evaluating a password against a policy",
    buckets=[0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01],
    registry=REGISTRY,
)

# Argument errors raised at the service entry point
argument_errors_total = Counter(
    name="pwpolicy_argument_errors_total",
    documentation="Total number of rejected calls with a missing argument",
    labelnames=["argument"],  # argument: policy, password
    registry=REGISTRY,
)


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
        with track_duration(evaluation_duration_seconds):
            policy.evaluate(password)
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


def record_policy_evaluation(valid: bool, violated_placeholders: list[str]) -> None:
    """
    Record the outcome of one policy evaluation.

    Args:
        valid: Whether the password satisfied the policy
        violated_placeholders: Placeholders of the violated rules
    """
    increment_counter(password_checks_total, result="valid" if valid else "invalid")
    for placeholder in violated_placeholders:
        increment_counter(rule_violations_total, placeholder=placeholder)
