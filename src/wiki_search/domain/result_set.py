"""Scored result sets and the boolean algebra that combines them.

A ``ScoredResultSet`` maps document identifiers (typically URLs) to an integer
relevance score accumulated from term frequencies. Sets are value objects:
the constructor copies the caller's mapping and every operator returns a new
instance, so operands are never modified.

Membership and relevance are kept distinct. ``doc_id in result_set`` asks
whether the document matched; ``relevance(doc_id)`` returns its score, or 0
when it did not match. Intersection and difference are decided on membership
only, so a document stored with a score of 0 still counts as a match.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict


def total_relevance(first: int, second: int) -> int:
    """Combine the relevance of one document from two result sets.

    Relevance is the sum of the term frequencies.
    """
    return first + second


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ScoredResultSet(Mapping[str, int]):
    """Immutable mapping from document identifier to relevance score.

    Scores are taken as-is: negative values are not rejected, they only make
    the ascending ranking less meaningful.
    """

    scores: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int] | None = None) -> ScoredResultSet:
        return cls(mapping or {})

    # ----------------------------- lookup ---------------------------------
    def relevance(self, doc_id: str) -> int:
        """Return the score for ``doc_id``, or 0 if the document is absent."""
        return self.scores.get(doc_id, 0)

    @property
    def doc_ids(self) -> frozenset[str]:
        return frozenset(self.scores)

    def to_dict(self) -> dict[str, int]:
        return dict(self.scores)

    def __getitem__(self, doc_id: str) -> int:
        return self.scores[doc_id]

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.scores

    def __iter__(self) -> Iterator[str]:
        return iter(self.scores)

    def __len__(self) -> int:
        return len(self.scores)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.scores)!r})"

    # mappingproxy cannot be pickled; rebuild from a plain dict
    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self.scores),))

    def __deepcopy__(self, memo: dict[int, Any]) -> ScoredResultSet:
        return type(self)(dict(self.scores))

    # ----------------------------- algebra --------------------------------
    @staticmethod
    def total_relevance(first: int, second: int) -> int:
        return total_relevance(first, second)

    def or_(self, other: ScoredResultSet) -> ScoredResultSet:
        """Union: every document in either set, scores combined.

        A document found on one side only keeps that side's score.
        """
        combined = dict(self.scores)
        for doc_id in other.scores:
            combined[doc_id] = self.total_relevance(self.relevance(doc_id), other.relevance(doc_id))
        return type(self)(combined)

    def and_(self, other: ScoredResultSet) -> ScoredResultSet:
        """Intersection: documents present in both sets, scores combined.

        ``a.and_(a)`` doubles every score; the operator is not idempotent.
        """
        combined = {
            doc_id: self.total_relevance(score, other.relevance(doc_id))
            for doc_id, score in self.scores.items()
            if doc_id in other.scores
        }
        return type(self)(combined)

    def minus(self, other: ScoredResultSet) -> ScoredResultSet:
        """Difference: documents of this set absent from ``other``, scores unchanged."""
        remaining = {doc_id: score for doc_id, score in self.scores.items() if doc_id not in other.scores}
        return type(self)(remaining)

    def __or__(self, other: Any) -> ScoredResultSet:
        if not isinstance(other, ScoredResultSet):
            return NotImplemented
        return self.or_(other)

    def __and__(self, other: Any) -> ScoredResultSet:
        if not isinstance(other, ScoredResultSet):
            return NotImplemented
        return self.and_(other)

    def __sub__(self, other: Any) -> ScoredResultSet:
        if not isinstance(other, ScoredResultSet):
            return NotImplemented
        return self.minus(other)


EMPTY_RESULT_SET = ScoredResultSet()


class RankedEntry(BaseModel):
    """A single (document, relevance) pair in a ranked listing."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    relevance: int

    def as_tuple(self) -> tuple[str, int]:
        return (self.doc_id, self.relevance)

    def __str__(self) -> str:
        return f"{self.doc_id}={self.relevance}"
