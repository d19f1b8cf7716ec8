import logging

from codex_lsp.core.queries import load_query, run_query
from codex_lsp.core.syntax import SyntaxTree

logger = logging.getLogger(__name__)

FIELD_BINDING_QUERY = "field_binding"


def locate_field_binding(syntax: SyntaxTree, interface_name: str) -> str | None:
    """Return the field a constructor stores its ``interface_name`` parameter into.

    When several constructors qualify, the last match in the file wins.
    Returns ``None`` when nothing matches.
    """
    query = load_query(FIELD_BINDING_QUERY)
    field_name: str | None = None
    for match in run_query(query, syntax, bindings={"binding.type": interface_name}):
        field_name = syntax.text(match["binding.field"])
        logger.debug("Candidate field binding: %s", field_name)
    if field_name is not None:
        logger.info("Chosen field for %s: %s", interface_name, field_name)
    return field_name
