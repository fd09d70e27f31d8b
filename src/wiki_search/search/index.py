"""Index lookup collaborators.

The query evaluator only depends on ``IndexLookup``: given a term, return the
``ScoredResultSet`` of documents containing it, scored by raw term frequency.
Backends subclass ``TermCountIndex`` and implement ``get_counts``; they raise
``IndexUnavailableError`` when the underlying store cannot be read.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
import logging
from typing import Protocol, runtime_checkable

from wiki_search.domain.result_set import ScoredResultSet


logger = logging.getLogger(__name__)


@runtime_checkable
class IndexLookup(Protocol):
    """Capability passed to the query evaluator."""

    def lookup(self, term: str) -> ScoredResultSet: ...


class TermCountIndex(ABC):
    """Base class for read-only term -> {doc_id: count} stores."""

    backend: str = "abstract"

    @abstractmethod
    def get_counts(self, term: str) -> Mapping[str, int]:
        """Return the term frequency of ``term`` for every document containing it."""

    def lookup(self, term: str) -> ScoredResultSet:
        counts = self.get_counts(term)
        logger.debug("Lookup %r on %s index: %d documents", term, self.backend, len(counts))
        return ScoredResultSet(counts)

    def close(self) -> None:  # noqa: B027 - optional hook
        """Release backend resources."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class InMemoryIndex(TermCountIndex):
    """Dictionary-backed index, used for tests and small fixed corpora."""

    backend = "memory"

    def __init__(self, term_counts: Mapping[str, Mapping[str, int]] | None = None):
        self._term_counts: dict[str, dict[str, int]] = {
            term: dict(counts) for term, counts in (term_counts or {}).items()
        }

    @property
    def terms(self) -> list[str]:
        return list(self._term_counts)

    def get_counts(self, term: str) -> Mapping[str, int]:
        return self._term_counts.get(term, {})
