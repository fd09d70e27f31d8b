"""Scored boolean search over a pre-built term-count index."""

from wiki_search.domain import (
    EMPTY_RESULT_SET,
    BooleanQuery,
    IndexUnavailableError,
    QueryOperator,
    RankedEntry,
    ScoredResultSet,
    SearchError,
)
from wiki_search.search.ranking import TieBreak, rank_results, top_results
from wiki_search.service_layer import QueryEvaluator


__version__ = "0.1.0"

__all__ = [
    "EMPTY_RESULT_SET",
    "BooleanQuery",
    "IndexUnavailableError",
    "QueryEvaluator",
    "QueryOperator",
    "RankedEntry",
    "ScoredResultSet",
    "SearchError",
    "TieBreak",
    "rank_results",
    "top_results",
]
