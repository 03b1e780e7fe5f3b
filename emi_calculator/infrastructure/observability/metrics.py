"""Prometheus metrics for calculation outcomes and form activity"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "emi_calculation_total",
    "Total calculate actions",
    ["outcome"],  # success | invalid_input
)

tenure_bucket_counter = Counter(
    "emi_tenure_bucket",
    "Successful calculations by tenure bucket",
    ["bucket"],  # <=12, 13-60, 61-240, >240
)

# Form state machine
form_transition_counter = Counter(
    "emi_form_transition_total",
    "Form state transitions",
    ["event", "status"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def tenure_bucket(tenure_months: int) -> str:
    if tenure_months <= 12:
        return "<=12"
    if tenure_months <= 60:
        return "13-60"
    if tenure_months <= 240:
        return "61-240"
    return ">240"


def record_calculation(succeeded: bool, tenure_months: int | None = None) -> None:
    """Record the outcome of a calculate action"""
    outcome = "success" if succeeded else "invalid_input"
    calculation_counter.labels(outcome=outcome).inc()

    if succeeded and tenure_months is not None:
        tenure_bucket_counter.labels(bucket=tenure_bucket(tenure_months)).inc()


def record_transition(event_name: str, status: str) -> None:
    form_transition_counter.labels(event=event_name, status=status).inc()
