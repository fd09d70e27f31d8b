"""Index factory for choosing between in-memory, JSON and SQLite backends."""

from __future__ import annotations

from collections.abc import Mapping

from wiki_search.config import Settings
from wiki_search.search.index import InMemoryIndex, TermCountIndex
from wiki_search.search.json_index import JsonTermCountIndex
from wiki_search.search.sqlite_index import SqliteTermCountIndex


def create_index(
    settings: Settings,
    *,
    term_counts: Mapping[str, Mapping[str, int]] | None = None,
) -> TermCountIndex:
    """Create the index lookup collaborator configured by ``settings``.

    Args:
        settings: Validated settings; ``index_path`` is set for file backends.
        term_counts: Initial contents for the in-memory backend.
    """
    if not settings.uses_file_index():
        return InMemoryIndex(term_counts)
    if settings.index_backend == "sqlite":
        return SqliteTermCountIndex(settings.index_path, busy_timeout_ms=settings.sqlite_busy_timeout_ms)
    return JsonTermCountIndex(settings.index_path)
