"""Command line entry point: evaluate a boolean query and print ranked results.

Operators are given as ordered flags and evaluated left to right::

    wiki-search java --and programming --not coffee --descending --limit 10

Each result is printed as ``doc_id=relevance`` on its own line.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

from pydantic import ValidationError

from wiki_search.config import Settings
from wiki_search.domain.errors import IndexUnavailableError
from wiki_search.domain.query import BooleanQuery, QueryClause, QueryOperator
from wiki_search.domain.result_set import RankedEntry
from wiki_search.observability.logging import configure_logging
from wiki_search.observability.metrics import get_metrics
from wiki_search.search.index_factory import create_index
from wiki_search.search.ranking import rank_results
from wiki_search.service_layer.query_evaluator import QueryEvaluator


logger = logging.getLogger(__name__)


class _ClauseAction(argparse.Action):
    """Append ``(operator, term)`` to a shared list so flag order is kept."""

    def __call__(self, parser, namespace, values, option_string=None):
        clauses = list(getattr(namespace, self.dest, None) or [])
        clauses.append((self.const, values))
        setattr(namespace, self.dest, clauses)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wiki-search",
        description="Evaluate a boolean query against a term-count index and print ranked results",
    )
    parser.add_argument("term", help="First query term")
    for operator in QueryOperator:
        parser.add_argument(
            f"--{operator.value}",
            dest="clauses",
            action=_ClauseAction,
            const=operator,
            metavar="TERM",
            help=f"Fold TERM into the result with {operator.value.upper()}",
        )
    parser.set_defaults(clauses=[])
    parser.add_argument(
        "--backend",
        choices=("memory", "json", "sqlite"),
        help="Index backend (overrides INDEX_BACKEND)",
    )
    parser.add_argument(
        "--index-path",
        type=Path,
        help="JSON snapshot or SQLite database (overrides INDEX_PATH)",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        default=None,
        help="List the most relevant documents first",
    )
    parser.add_argument(
        "--tie-break",
        choices=("stable", "doc_id"),
        help="Order of documents with equal relevance",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of results to print",
    )
    parser.add_argument(
        "--show-terms",
        action="store_true",
        help="Print each term's own results before the combined query",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Write Prometheus metrics for the run to stderr when done",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "index_backend": args.backend,
        "index_path": args.index_path,
        "rank_descending": args.descending,
        "tie_break": args.tie_break,
        "max_results": args.limit,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def _print_entries(entries: Sequence[RankedEntry]) -> None:
    for entry in entries:
        print(entry)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = _load_settings(args)
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # stdout carries results only
    configure_logging(settings.log_level, json_output=settings.log_json, stream=sys.stderr)

    try:
        clauses = tuple(QueryClause(operator=operator, term=term) for operator, term in args.clauses)
        query = BooleanQuery(first_term=args.term, clauses=clauses)
    except ValidationError as exc:
        logger.error("Invalid query: %s", exc)
        return 1

    limit = settings.max_results or None
    exit_code = 0
    with create_index(settings) as index:
        evaluator = QueryEvaluator(index)
        try:
            if args.show_terms:
                for term in query.terms:
                    print(f"Query: {term}")
                    entries = rank_results(
                        evaluator.search(term), descending=settings.rank_descending, tie_break=settings.tie_break
                    )
                    _print_entries(entries[:limit])
            print(f"Query: {query}")
            _print_entries(
                evaluator.evaluate_ranked(
                    query, descending=settings.rank_descending, tie_break=settings.tie_break, limit=limit
                )
            )
        except IndexUnavailableError as exc:
            logger.error("Index unavailable: %s", exc)
            exit_code = 1

    if args.metrics:
        sys.stderr.write(get_metrics().decode("utf-8"))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
