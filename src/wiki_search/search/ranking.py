"""Ranking helpers that turn a result set into an ordered listing.

The natural order is ascending by relevance (least relevant first). Python's
sort is stable, so with ``TieBreak.STABLE`` documents with equal scores keep
the insertion order of the result set and repeated calls return identical
listings. ``TieBreak.DOC_ID`` orders ties by identifier instead, which makes
the output independent of how the set was built.
"""

from __future__ import annotations

from enum import Enum
from operator import attrgetter

from wiki_search.domain.result_set import RankedEntry, ScoredResultSet


class TieBreak(str, Enum):
    """How entries with equal relevance are ordered."""

    STABLE = "stable"
    DOC_ID = "doc_id"


_BY_RELEVANCE = attrgetter("relevance")


def rank_results(
    result_set: ScoredResultSet,
    *,
    descending: bool = False,
    tie_break: TieBreak | str = TieBreak.STABLE,
) -> list[RankedEntry]:
    """Return the entries of ``result_set`` sorted by relevance.

    Args:
        result_set: Result set to rank.
        descending: Put the most relevant documents first. Ties keep the
            order chosen by ``tie_break`` in both directions.
        tie_break: Ordering for entries with equal relevance.

    Returns:
        List of ``RankedEntry``; empty for an empty result set.
    """
    entries = [RankedEntry(doc_id=doc_id, relevance=score) for doc_id, score in result_set.items()]
    if TieBreak(tie_break) is TieBreak.DOC_ID:
        entries.sort(key=attrgetter("doc_id"))
    # reverse=True still leaves equal elements in input order
    entries.sort(key=_BY_RELEVANCE, reverse=descending)
    return entries


def top_results(
    result_set: ScoredResultSet,
    k: int,
    *,
    tie_break: TieBreak | str = TieBreak.STABLE,
) -> list[RankedEntry]:
    """Return the ``k`` most relevant entries, most relevant first."""
    if k <= 0:
        return []
    return rank_results(result_set, descending=True, tie_break=tie_break)[:k]
