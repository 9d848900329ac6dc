"""Prometheus metrics for monitoring approval rates and period extensions"""

from prometheus_client import Counter, Histogram

from decision_engine.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | InvalidIdentityCode | ... | NoValidLoan
)

period_extension_counter = Counter(
    "loan_period_extension_total",
    "Approvals granted with a longer period than requested",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(decision: Decision, requested_period: int) -> None:
    """Record decision metrics for monitoring approval and rejection rates"""
    outcome = "approved" if decision.approved else decision.error.kind.value
    decision_counter.labels(outcome=outcome).inc()

    if decision.approved and decision.loan_period != requested_period:
        period_extension_counter.inc()
