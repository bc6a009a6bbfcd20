"""Prometheus metrics for monitoring decision outcomes and approved loan sizes"""

from prometheus_client import Counter, Histogram

from loan_gateway.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | approved_with_warning | rejected | no_valid_loan
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # <=2000, 2001-5000, 5001-9999, 10000
)

approved_period_histogram = Histogram(
    "loan_approved_period_months",
    "Approved loan periods",
    buckets=[12, 18, 24, 36, 48, 60],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def decision_outcome(decision: Decision) -> str:
    if not decision.approved:
        return "rejected"
    if decision.error_message:
        return "approved_with_warning"
    return "approved"


def record_decision(decision: Decision) -> None:
    """Record outcome and, for approvals, amount and period distribution"""
    decision_counter.labels(outcome=decision_outcome(decision)).inc()

    if not decision.approved:
        return

    if decision.loan_amount <= 2000:
        bucket = "<=2000"
    elif decision.loan_amount <= 5000:
        bucket = "2001-5000"
    elif decision.loan_amount < 10000:
        bucket = "5001-9999"
    else:
        bucket = "10000"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()
    approved_period_histogram.observe(decision.loan_period)


def record_no_valid_loan() -> None:
    decision_counter.labels(outcome="no_valid_loan").inc()
