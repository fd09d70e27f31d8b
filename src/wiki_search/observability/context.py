"""Query context propagation for log correlation."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from uuid import uuid4


query_context: ContextVar[dict | None] = ContextVar("query_context", default=None)


def generate_query_id() -> str:
    """Generate a 16-char hex query ID."""
    return uuid4().hex[:16]


def get_query_context() -> dict:
    """Get the current query context, empty outside an evaluation."""
    return query_context.get() or {}


@contextmanager
def bind_query_context(query: str, query_id: str | None = None) -> Iterator[dict]:
    """Bind ``query`` and a query ID for the duration of the block."""
    ctx = {"query_id": query_id or generate_query_id(), "query": query}
    token = query_context.set(ctx)
    try:
        yield ctx
    finally:
        query_context.reset(token)
