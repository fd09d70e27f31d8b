"""Observability module for structured logging, query context and metrics."""

from wiki_search.observability.context import bind_query_context, get_query_context, query_context
from wiki_search.observability.logging import JsonFormatter, configure_logging
from wiki_search.observability.metrics import (
    INDEX_LOOKUPS,
    QUERY_LATENCY,
    RESULT_SIZE,
    get_metrics,
    track_latency,
)


__all__ = [
    "INDEX_LOOKUPS",
    "QUERY_LATENCY",
    "RESULT_SIZE",
    "JsonFormatter",
    "bind_query_context",
    "configure_logging",
    "get_metrics",
    "get_query_context",
    "query_context",
    "track_latency",
]
