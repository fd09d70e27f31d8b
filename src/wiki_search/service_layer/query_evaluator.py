"""Boolean query evaluation over an injected index lookup collaborator.

The evaluator looks each distinct term up once, seeds the running result with
the first term and folds every clause in left to right:

- ``AND``: intersection
- ``OR``: union
- ``NOT``: difference

Lookup failures propagate unchanged. A term the index cannot answer is never
turned into an empty result set.
"""

import logging

from wiki_search.domain.query import BooleanQuery, QueryOperator
from wiki_search.domain.result_set import RankedEntry, ScoredResultSet
from wiki_search.observability.context import bind_query_context
from wiki_search.observability.metrics import INDEX_LOOKUPS, QUERY_LATENCY, RESULT_SIZE, track_latency
from wiki_search.search.index import IndexLookup
from wiki_search.search.ranking import TieBreak, rank_results


logger = logging.getLogger(__name__)


def _fold(accumulator: ScoredResultSet, operator: QueryOperator, operand: ScoredResultSet) -> ScoredResultSet:
    if operator is QueryOperator.AND:
        return accumulator.and_(operand)
    if operator is QueryOperator.OR:
        return accumulator.or_(operand)
    return accumulator.minus(operand)


class QueryEvaluator:
    """Evaluates boolean queries into a single scored result set."""

    def __init__(self, index: IndexLookup):
        """Initialize the evaluator.

        Args:
            index: Collaborator answering single-term lookups
        """
        self.index = index
        self._backend = getattr(index, "backend", type(index).__name__)

    def search(self, term: str) -> ScoredResultSet:
        """Look up a single term."""
        try:
            result = self.index.lookup(term)
        except Exception:
            INDEX_LOOKUPS.labels(backend=self._backend, status="error").inc()
            logger.warning("Index lookup failed for term %r", term)
            raise
        INDEX_LOOKUPS.labels(backend=self._backend, status="ok").inc()
        return result

    def evaluate(self, query: BooleanQuery) -> ScoredResultSet:
        """Evaluate ``query`` left to right.

        Args:
            query: First term plus ordered operator clauses

        Returns:
            Combined result set; the first term's lookup when there are no clauses

        Raises:
            IndexUnavailableError: If the collaborator cannot answer a lookup
        """
        with bind_query_context(str(query)), track_latency(QUERY_LATENCY):
            lookups: dict[str, ScoredResultSet] = {}

            def lookup_once(term: str) -> ScoredResultSet:
                if term not in lookups:
                    lookups[term] = self.search(term)
                return lookups[term]

            result = lookup_once(query.first_term)
            logger.debug("Seeded query with %r: %d documents", query.first_term, len(result))
            for clause in query.clauses:
                result = _fold(result, clause.operator, lookup_once(clause.term))
                logger.debug("Applied %s: %d documents", clause, len(result))

            RESULT_SIZE.observe(len(result))
            logger.debug("Evaluated %s with %d lookups", query, len(lookups))
            return result

    def evaluate_ranked(
        self,
        query: BooleanQuery,
        *,
        descending: bool = False,
        tie_break: TieBreak | str = TieBreak.STABLE,
        limit: int | None = None,
    ) -> list[RankedEntry]:
        """Evaluate ``query`` and return its ranked entries."""
        entries = rank_results(self.evaluate(query), descending=descending, tie_break=tie_break)
        if limit:
            return entries[:limit]
        return entries
