"""Unit tests for result ranking."""

import pytest

from wiki_search.domain.result_set import EMPTY_RESULT_SET, ScoredResultSet
from wiki_search.search.ranking import TieBreak, rank_results, top_results


def _pairs(entries):
    return [entry.as_tuple() for entry in entries]


class TestRankResults:
    """Ascending relevance ordering with explicit tie handling."""

    def test_scenario_union_ranks_ascending_with_stable_ties(self, java_results, programming_results):
        union = java_results.or_(programming_results)

        assert _pairs(rank_results(union)) == [("wiki/C", 1), ("wiki/Java", 5), ("wiki/Python", 5)]

    def test_empty_set_ranks_to_empty_list(self):
        assert rank_results(EMPTY_RESULT_SET) == []

    @pytest.mark.parametrize(
        "scores",
        [
            {"a": 3, "b": 1, "c": 2},
            {"z": 0, "y": 0, "x": 0},
            {"a": -1, "b": 4, "c": -1, "d": 2},
            {"solo": 7},
        ],
    )
    def test_output_is_non_decreasing_and_repeatable(self, scores):
        results = ScoredResultSet(scores)

        first = rank_results(results)
        second = rank_results(results)

        relevances = [entry.relevance for entry in first]
        assert relevances == sorted(relevances)
        assert first == second
        assert len(first) == len(results)

    def test_stable_ties_follow_insertion_order(self):
        results = ScoredResultSet({"wiki/B": 2, "wiki/A": 2, "wiki/C": 1})

        assert _pairs(rank_results(results)) == [("wiki/C", 1), ("wiki/B", 2), ("wiki/A", 2)]

    def test_doc_id_tie_break(self):
        results = ScoredResultSet({"wiki/B": 2, "wiki/A": 2, "wiki/C": 1})

        ranked = rank_results(results, tie_break=TieBreak.DOC_ID)

        assert _pairs(ranked) == [("wiki/C", 1), ("wiki/A", 2), ("wiki/B", 2)]

    def test_tie_break_accepts_string(self):
        results = ScoredResultSet({"wiki/B": 2, "wiki/A": 2})

        assert _pairs(rank_results(results, tie_break="doc_id")) == [("wiki/A", 2), ("wiki/B", 2)]

    def test_unknown_tie_break_is_rejected(self):
        with pytest.raises(ValueError):
            rank_results(ScoredResultSet({"a": 1}), tie_break="random")

    def test_descending_keeps_tie_order(self, java_results, programming_results):
        union = java_results.or_(programming_results)

        ranked = rank_results(union, descending=True)

        assert _pairs(ranked) == [("wiki/Java", 5), ("wiki/Python", 5), ("wiki/C", 1)]

    def test_ranking_does_not_modify_result_set(self):
        results = ScoredResultSet({"b": 2, "a": 1})

        rank_results(results, descending=True, tie_break=TieBreak.DOC_ID)

        assert list(results.items()) == [("b", 2), ("a", 1)]


class TestTopResults:
    """Top-k convenience helper."""

    def test_returns_most_relevant_first(self):
        results = ScoredResultSet({"a": 1, "b": 9, "c": 4, "d": 9})

        assert _pairs(top_results(results, 3)) == [("b", 9), ("d", 9), ("c", 4)]

    def test_k_larger_than_set(self):
        assert _pairs(top_results(ScoredResultSet({"a": 1}), 10)) == [("a", 1)]

    @pytest.mark.parametrize("k", [0, -3])
    def test_non_positive_k_returns_nothing(self, k):
        assert top_results(ScoredResultSet({"a": 1}), k) == []
