"""Boolean query value objects.

A ``BooleanQuery`` is an explicit evaluation order, not parsed syntax: the
first term seeds the result and each clause folds one more term in, left to
right, with its operator. There is no precedence.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QueryOperator(str, Enum):
    """Set operator applied when a clause is folded into the running result."""

    AND = "and"
    OR = "or"
    NOT = "not"


class QueryClause(BaseModel):
    """One ``<operator> <term>`` step of a boolean query."""

    model_config = ConfigDict(frozen=True)

    operator: QueryOperator
    term: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.operator.value.upper()} {self.term}"


class BooleanQuery(BaseModel):
    """Immutable boolean query evaluated left to right."""

    model_config = ConfigDict(frozen=True)

    first_term: str = Field(min_length=1)
    clauses: tuple[QueryClause, ...] = ()

    @classmethod
    def of(cls, term: str) -> BooleanQuery:
        return cls(first_term=term)

    def _with(self, operator: QueryOperator, term: str) -> BooleanQuery:
        clause = QueryClause(operator=operator, term=term)
        return self.model_copy(update={"clauses": (*self.clauses, clause)})

    def and_(self, term: str) -> BooleanQuery:
        return self._with(QueryOperator.AND, term)

    def or_(self, term: str) -> BooleanQuery:
        return self._with(QueryOperator.OR, term)

    def not_(self, term: str) -> BooleanQuery:
        return self._with(QueryOperator.NOT, term)

    @property
    def terms(self) -> list[str]:
        """Distinct terms in first-seen order."""
        seen = dict.fromkeys([self.first_term, *(clause.term for clause in self.clauses)])
        return list(seen)

    def __str__(self) -> str:
        return " ".join([self.first_term, *(str(clause) for clause in self.clauses)])
