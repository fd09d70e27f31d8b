"""Error taxonomy for the search core.

Only the index lookup collaborator raises; the result-set operators are total.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base error for the search domain."""


class IndexUnavailableError(SearchError):
    """Raised when the term-count index cannot be read.

    Callers must not treat this as "term not found".
    """

    def __init__(self, message: str, *, term: str | None = None, backend: str | None = None) -> None:
        super().__init__(message)
        self.term = term
        self.backend = backend
