"""Prometheus metrics for monitoring report volume, dataset sizes and failures"""

from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "insights_reports_total",
    "Total transaction reports generated",
    ["source"],  # api | cli
)

report_failure_counter = Counter(
    "insights_report_failures_total",
    "Report requests that could not be completed",
    ["reason"],  # empty_input | insufficient_data | invalid_data | source_unavailable
)

dataset_size_histogram = Histogram(
    "insights_dataset_size",
    "Number of transactions per analyzed dataset",
    buckets=[1, 3, 10, 50, 100, 500, 1000, 5000, 10000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(source: str, transaction_count: int) -> None:
    """Record a generated report and the size of the dataset behind it"""
    report_counter.labels(source=source).inc()
    dataset_size_histogram.observe(transaction_count)


def record_failure(reason: str) -> None:
    report_failure_counter.labels(reason=reason).inc()
