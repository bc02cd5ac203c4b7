"""
Prometheus metrics for bookshelf

Counters for repository activity, CSV parsing and pump runs.
"""
import os

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

REGISTRY = CollectorRegistry()


# =======================
# REPOSITORY METRICS
# =======================

repository_operations_total = Counter(
    name="bookshelf_repository_operations_total",
    documentation="Total number of repository operations",
    labelnames=["backend", "operation"],  # backend: memory, csv, json
    registry=REGISTRY,
)

csv_rows_skipped_total = Counter(
    name="bookshelf_csv_rows_skipped_total",
    documentation="Total number of malformed CSV rows skipped on read",
    labelnames=["reason"],  # reason: too_few_fields, invalid_id
    registry=REGISTRY,
)

json_documents_discarded_total = Counter(
    name="bookshelf_json_documents_discarded_total",
    documentation="Total number of unreadable JSON documents treated as empty",
    registry=REGISTRY,
)

# =======================
# PUMP METRICS
# =======================

pump_items_written_total = Counter(
    name="bookshelf_pump_items_written_total",
    documentation="Total number of items written by pumps",
    labelnames=["pump"],
    registry=REGISTRY,
)

pump_write_retries_total = Counter(
    name="bookshelf_pump_write_retries_total",
    documentation="Total number of sink write retries",
    labelnames=["pump"],
    registry=REGISTRY,
)

pump_runs_total = Counter(
    name="bookshelf_pump_runs_total",
    documentation="Total number of pump runs",
    labelnames=["pump", "status"],  # status: success, failure, cancelled
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """Generate Prometheus metrics in text format"""
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Get content type for Prometheus metrics"""
    return CONTENT_TYPE_LATEST


def start_metrics_server(port: int | None = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Lazy import: only needed when the metrics endpoint is enabled
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def get_sample_value(name: str, **labels) -> float:
    """
    Read a sample from the bookshelf registry, 0.0 if never recorded

    Args:
        name: Sample name, e.g. "bookshelf_pump_runs_total"
        **labels: Label values identifying the sample
    """
    value = REGISTRY.get_sample_value(name, labels)
    return value if value is not None else 0.0


# =======================
# METRICS COLLECTOR CLASS
# =======================

class MetricsCollector:
    """
    Unified interface for recording repository and pump metrics.
    """

    def record_repository_operation(self, backend: str, operation: str) -> None:
        increment_counter(repository_operations_total, backend=backend, operation=operation)

    def record_skipped_csv_row(self, reason: str) -> None:
        increment_counter(csv_rows_skipped_total, reason=reason)

    def record_discarded_json_document(self) -> None:
        increment_counter(json_documents_discarded_total)

    def record_item_written(self, pump: str) -> None:
        increment_counter(pump_items_written_total, pump=pump)

    def record_write_retry(self, pump: str) -> None:
        increment_counter(pump_write_retries_total, pump=pump)

    def record_run(self, pump: str, status: str) -> None:
        increment_counter(pump_runs_total, pump=pump, status=status)


default_collector = MetricsCollector()
