"""Term-count index loaded from a JSON snapshot.

The snapshot is a single object ``{"term": {"doc_id": count, ...}, ...}``.
It is read lazily on the first lookup and kept in memory afterwards. Counts
must be JSON integers: booleans and numeric strings are rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path

import orjson
from pydantic import TypeAdapter, ValidationError

from wiki_search.domain.errors import IndexUnavailableError
from wiki_search.search.index import TermCountIndex


logger = logging.getLogger(__name__)

_SNAPSHOT_ADAPTER: TypeAdapter[dict[str, dict[str, int]]] = TypeAdapter(dict[str, dict[str, int]])


class JsonTermCountIndex(TermCountIndex):
    """Read-only index backed by a JSON snapshot file."""

    backend = "json"

    def __init__(self, path: Path):
        self.path = Path(path)
        self._term_counts: dict[str, dict[str, int]] | None = None

    def _load(self, term: str) -> dict[str, dict[str, int]]:
        if self._term_counts is not None:
            return self._term_counts
        try:
            payload = orjson.loads(self.path.read_bytes())
            term_counts = _SNAPSHOT_ADAPTER.validate_python(payload, strict=True)
        except OSError as exc:
            raise IndexUnavailableError(
                f"Cannot read index snapshot {self.path}: {exc}", term=term, backend=self.backend
            ) from exc
        except orjson.JSONDecodeError as exc:
            raise IndexUnavailableError(
                f"Corrupt index snapshot {self.path}: {exc}", term=term, backend=self.backend
            ) from exc
        except ValidationError as exc:
            raise IndexUnavailableError(
                f"Index snapshot {self.path} is not a term -> document -> count mapping",
                term=term,
                backend=self.backend,
            ) from exc
        logger.debug("Loaded index snapshot %s (%d terms)", self.path, len(term_counts))
        self._term_counts = term_counts
        return term_counts

    def get_counts(self, term: str) -> Mapping[str, int]:
        return self._load(term).get(term, {})
