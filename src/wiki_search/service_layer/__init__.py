"""Service layer - orchestrates lookups and set algebra for boolean queries."""

from wiki_search.service_layer.query_evaluator import QueryEvaluator


__all__ = ["QueryEvaluator"]
