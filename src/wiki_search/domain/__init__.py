"""Domain layer - result sets, queries and errors with no infrastructure dependencies.

- ``ScoredResultSet``: immutable document -> relevance mapping with union,
  intersection and difference
- ``RankedEntry``: one (document, relevance) pair of a ranked listing
- ``BooleanQuery``: explicit left-to-right evaluation order of terms
"""

from wiki_search.domain.errors import IndexUnavailableError, SearchError
from wiki_search.domain.query import BooleanQuery, QueryClause, QueryOperator
from wiki_search.domain.result_set import EMPTY_RESULT_SET, RankedEntry, ScoredResultSet, total_relevance


__all__ = [
    "EMPTY_RESULT_SET",
    "BooleanQuery",
    "IndexUnavailableError",
    "QueryClause",
    "QueryOperator",
    "RankedEntry",
    "ScoredResultSet",
    "SearchError",
    "total_relevance",
]
