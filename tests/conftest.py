"""Shared test fixtures and configuration."""

from pathlib import Path
import sqlite3
import sys

import orjson
import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from wiki_search.domain.result_set import ScoredResultSet
from wiki_search.search.index import InMemoryIndex


# Complete test environment that overrides every config value
TEST_ENV = {
    "INDEX_BACKEND": "memory",
    "SQLITE_BUSY_TIMEOUT_MS": "1000",
    "RANK_DESCENDING": "false",
    "TIE_BREAK": "stable",
    "MAX_RESULTS": "0",
    "LOG_LEVEL": "info",
    "LOG_JSON": "false",
}

# Term counts from the two-term demo query: "java" and "programming"
SCENARIO_TERM_COUNTS = {
    "java": {"wiki/Java": 3, "wiki/C": 1},
    "programming": {"wiki/Java": 2, "wiki/Python": 5},
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Reset config environment variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("INDEX_PATH", raising=False)
    # Keep a developer .env file out of Settings()
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def scenario_index():
    return InMemoryIndex(SCENARIO_TERM_COUNTS)


@pytest.fixture
def java_results():
    return ScoredResultSet(SCENARIO_TERM_COUNTS["java"])


@pytest.fixture
def programming_results():
    return ScoredResultSet(SCENARIO_TERM_COUNTS["programming"])


def write_sqlite_index(path: Path, term_counts: dict[str, dict[str, int]]) -> Path:
    """Create a ``term_counts`` database the way the indexer lays it out."""
    conn = sqlite3.connect(path)
    try:
        conn.execute(
            "CREATE TABLE term_counts ("
            "term TEXT NOT NULL, doc_id TEXT NOT NULL, count INTEGER NOT NULL, "
            "PRIMARY KEY (term, doc_id)) WITHOUT ROWID"
        )
        conn.executemany(
            "INSERT INTO term_counts (term, doc_id, count) VALUES (?, ?, ?)",
            [(term, doc_id, count) for term, counts in term_counts.items() for doc_id, count in counts.items()],
        )
        conn.commit()
    finally:
        conn.close()
    return path


def write_json_index(path: Path, term_counts: dict[str, dict[str, int]]) -> Path:
    path.write_bytes(orjson.dumps(term_counts))
    return path


@pytest.fixture
def sqlite_index_path(tmp_path):
    return write_sqlite_index(tmp_path / "index.db", SCENARIO_TERM_COUNTS)


@pytest.fixture
def json_index_path(tmp_path):
    return write_json_index(tmp_path / "index.json", SCENARIO_TERM_COUNTS)


@pytest.fixture
def sqlite_index_factory(tmp_path):
    def _make(term_counts: dict[str, dict[str, int]], name: str = "custom.db") -> Path:
        return write_sqlite_index(tmp_path / name, term_counts)

    return _make


@pytest.fixture
def json_index_factory(tmp_path):
    def _make(term_counts: dict[str, dict[str, int]], name: str = "custom.json") -> Path:
        return write_json_index(tmp_path / name, term_counts)

    return _make


def pytest_collection_modifyitems(config, items):
    """Mark tests by directory: tests/unit -> unit, tests/integration -> integration."""
    for item in items:
        path = Path(str(item.fspath))
        if "integration" in path.parts:
            item.add_marker(pytest.mark.integration)
        elif "unit" in path.parts:
            item.add_marker(pytest.mark.unit)
