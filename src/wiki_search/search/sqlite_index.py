"""SQLite-backed term-count index.

Reads a single table populated by the indexing pipeline::

    CREATE TABLE term_counts (
        term   TEXT    NOT NULL,
        doc_id TEXT    NOT NULL,
        count  INTEGER NOT NULL,
        PRIMARY KEY (term, doc_id)
    ) WITHOUT ROWID;

The database is opened read-only. Any ``sqlite3.Error`` (missing file, locked
or corrupt database, missing table) surfaces as ``IndexUnavailableError``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
import logging
from pathlib import Path
import sqlite3
import threading

from wiki_search.domain.errors import IndexUnavailableError
from wiki_search.search.index import TermCountIndex
from wiki_search.search.sqlite_pragmas import apply_read_pragmas


logger = logging.getLogger(__name__)

TERM_COUNTS_TABLE = "term_counts"
_LOOKUP_SQL = f"SELECT doc_id, count FROM {TERM_COUNTS_TABLE} WHERE term = ? ORDER BY doc_id"


class SQLiteConnectionPool:
    """Thread-local read-only connections to one database file."""

    def __init__(self, db_path: Path, *, busy_timeout_ms: int | None = 30000):
        self.db_path = db_path
        self.busy_timeout_ms = busy_timeout_ms
        self._local = threading.local()

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get a thread-local connection."""
        if getattr(self._local, "connection", None) is None:
            self._local.connection = self._create_connection()

        yield self._local.connection

    def _create_connection(self) -> sqlite3.Connection:
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
        try:
            apply_read_pragmas(conn, busy_timeout_ms=self.busy_timeout_ms)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    def close_all(self) -> None:
        """Close the calling thread's connection."""
        connection = getattr(self._local, "connection", None)
        if connection is not None:
            try:
                connection.close()
            except sqlite3.Error:
                logger.debug("Ignoring error while closing %s", self.db_path, exc_info=True)
            self._local.connection = None


class SqliteTermCountIndex(TermCountIndex):
    """Read-only index over a SQLite ``term_counts`` table."""

    backend = "sqlite"

    def __init__(self, db_path: Path, *, busy_timeout_ms: int | None = 30000):
        self.db_path = Path(db_path)
        self._pool = SQLiteConnectionPool(self.db_path, busy_timeout_ms=busy_timeout_ms)

    def get_counts(self, term: str) -> Mapping[str, int]:
        try:
            with self._pool.get_connection() as conn:
                rows = conn.execute(_LOOKUP_SQL, (term,)).fetchall()
        except sqlite3.Error as exc:
            # Drop the connection so the next lookup reconnects
            self._pool.close_all()
            raise IndexUnavailableError(
                f"Cannot read term counts for {term!r} from {self.db_path}: {exc}",
                term=term,
                backend=self.backend,
            ) from exc
        return {str(doc_id): int(count) for doc_id, count in rows}

    def close(self) -> None:
        self._pool.close_all()
