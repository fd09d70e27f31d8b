"""Prometheus metrics for index lookups and query evaluation."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


INDEX_LOOKUPS = Counter(
    "wiki_search_index_lookups_total",
    "Term lookups against the index collaborator",
    ["backend", "status"],
)

QUERY_LATENCY = Histogram(
    "wiki_search_query_latency_seconds",
    "Boolean query evaluation latency",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

RESULT_SIZE = Histogram(
    "wiki_search_result_documents",
    "Documents in an evaluated result set",
    buckets=(0, 1, 5, 10, 50, 100, 500, 1000, 5000),
)


@contextmanager
def track_latency(histogram: Histogram) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()
