from dataclasses import dataclass
from typing import cast

from tree_sitter import Language, Node, Parser, Tree
from tree_sitter_language_pack import SupportedLanguage, get_language, get_parser

from codex_lsp.core.errors import ParseFailure
from codex_lsp.models import Position

LANGUAGE = "csharp"


@dataclass(frozen=True)
class SyntaxTree:
    """A parsed document together with the exact bytes it was parsed from."""

    tree: Tree
    source: bytes

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")


def csharp_language() -> Language:
    return get_language(cast(SupportedLanguage, LANGUAGE))


def csharp_parser() -> Parser:
    return get_parser(cast(SupportedLanguage, LANGUAGE))


def parse_document(text: str) -> SyntaxTree:
    source_bytes = text.encode("utf-8")
    tree = csharp_parser().parse(source_bytes)
    if tree is None:
        raise ParseFailure(f"{LANGUAGE} parser returned no tree ({len(source_bytes)} bytes)")
    return SyntaxTree(tree=tree, source=source_bytes)


def start_position(node: Node) -> Position:
    return Position(row=node.start_point[0], column=node.start_point[1])


def end_position(node: Node) -> Position:
    return Position(row=node.end_point[0], column=node.end_point[1])
