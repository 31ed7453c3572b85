"""Prometheus metrics for seeding, dashboard queries, and HTTP latency"""

from prometheus_client import Counter, Histogram, Gauge

# Seed metrics
seed_counter = Counter(
    "sales_dashboard_seed_total",
    "Seed runs by outcome",
    ["outcome"],  # success | failure
)

seeded_records_gauge = Gauge(
    "sales_dashboard_seeded_records",
    "Records inserted by the last successful seed",
)

seed_duration_histogram = Histogram(
    "sales_dashboard_seed_duration_seconds",
    "Time to download and store the seed dataset",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Dashboard queries
query_counter = Counter(
    "sales_dashboard_query_total",
    "Dashboard queries served",
    ["view", "month"],  # month is 1-12 or "all"
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_seed(inserted: int | None) -> None:
    """Record a seed outcome; None means the seed failed"""
    if inserted is None:
        seed_counter.labels(outcome="failure").inc()
        return

    seed_counter.labels(outcome="success").inc()
    seeded_records_gauge.set(inserted)


def record_query(view: str, month: int | None) -> None:
    """Count a dashboard query by view and month"""
    query_counter.labels(view=view, month=str(month) if month is not None else "all").inc()
