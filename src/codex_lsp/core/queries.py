"""Loading and running the structural queries shipped in ``codex_lsp/queries``.

Query files are static. Values only known at analysis time (the configured
interface name, the extracted field name) are never spliced into query
source; they are passed as *bindings*, a mapping of capture name to the exact
text that capture must have for a match to be kept.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from tree_sitter import Node, Query, QueryCursor, QueryError

from codex_lsp.core.errors import QueryCompileFailure
from codex_lsp.core.syntax import LANGUAGE, SyntaxTree, csharp_language

logger = logging.getLogger(__name__)

QUERIES_DIR = Path(__file__).parent.parent / "queries"

Match = dict[str, Node]


def compile_query(query_text: str, name: str = "<inline>") -> Query:
    try:
        return Query(csharp_language(), query_text)
    except QueryError as exc:
        raise QueryCompileFailure(f"Query '{name}' failed to compile: {exc}") from exc


@lru_cache(maxsize=None)
def load_query(query_type: str) -> Query:
    query_path = QUERIES_DIR / f"{LANGUAGE}_{query_type}.scm"
    if not query_path.exists():
        raise QueryCompileFailure(f"Query file not found: {query_path}")
    return compile_query(query_path.read_text(encoding="utf-8"), query_path.name)


def _satisfies(syntax: SyntaxTree, captures: dict[str, list[Node]], bindings: Mapping[str, str]) -> bool:
    for capture_name, expected in bindings.items():
        nodes = captures.get(capture_name)
        if not nodes:
            return False
        if any(syntax.text(node) != expected for node in nodes):
            return False
    return True


def run_query(query: Query, syntax: SyntaxTree, bindings: Mapping[str, str] | None = None) -> list[Match]:
    """Return the matches of ``query`` in encounter order, captures keyed by name."""
    cursor = QueryCursor(query)
    results: list[Match] = []
    for _pattern_idx, captures in cursor.matches(syntax.root):
        if bindings and not _satisfies(syntax, captures, bindings):
            continue
        match: Match = {}
        for capture_name, nodes in captures.items():
            if nodes:
                match[capture_name] = nodes[0]
        for capture_name, node in match.items():
            logger.debug(
                "Matched %s=%r range: %s -> %s",
                capture_name,
                syntax.text(node),
                tuple(node.start_point),
                tuple(node.end_point),
            )
        results.append(match)
    return results
