"""Prometheus metrics for monitoring ledger throughput, rejections and lock contention"""

from prometheus_client import Counter, Histogram

# Transaction metrics
transaction_counter = Counter(
    "ledger_transactions_total",
    "Transactions submitted to the ledger",
    ["type", "outcome"],  # credit | debit, applied | rejected
)

rejection_counter = Counter(
    "ledger_rejections_total",
    "Rejected transactions by reason",
    ["reason"],  # customer_not_found | invalid_attribute | insufficient_funds
)

# Contention on the customer row lock
row_lock_wait_histogram = Histogram(
    "ledger_row_lock_wait_seconds",
    "Time spent acquiring the customer row lock",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

history_counter = Counter(
    "ledger_history_reads_total",
    "Statement reads served",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_transaction(transaction_type: str, applied: bool, reason: str | None = None) -> None:
    """Record outcome of a submitted transaction"""
    outcome = "applied" if applied else "rejected"
    transaction_counter.labels(type=transaction_type, outcome=outcome).inc()

    if not applied and reason:
        rejection_counter.labels(reason=reason).inc()
