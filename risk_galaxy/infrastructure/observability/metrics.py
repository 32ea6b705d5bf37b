"""Prometheus metrics for monitoring galaxy runs, status distribution and provider health"""

from typing import Iterable
from prometheus_client import Counter, Histogram

from risk_galaxy.domain.models import RiskRecord

# Pipeline metrics
galaxy_run_counter = Counter(
    "risk_galaxy_runs_total",
    "Total galaxy pipeline runs",
    ["operation"],  # galaxy | prediction
)

file_status_counter = Counter(
    "risk_galaxy_file_status_total",
    "Scored files by status band",
    ["status"],  # LOW | MEDIUM | HIGH | CRITICAL
)

invalid_signal_counter = Counter(
    "risk_galaxy_invalid_signals_total",
    "Pipeline runs rejected because of a degenerate signal",
)

# Signal provider metrics
provider_fetch_failures_counter = Counter(
    "signal_provider_failures_total",
    "Failed signal provider fetches",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_galaxy_run(operation: str, records: Iterable[RiskRecord]) -> None:
    """Record run count and per-status distribution"""
    galaxy_run_counter.labels(operation=operation).inc()
    for record in records:
        file_status_counter.labels(status=record.status.value).inc()
