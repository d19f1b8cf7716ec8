from codex_lsp.core.queries import load_query, run_query
from codex_lsp.core.syntax import SyntaxTree, end_position, start_position
from codex_lsp.models import UsageSite

USAGE_QUERY = "usage"


def locate_usage_sites(syntax: SyntaxTree, field_name: str) -> list[UsageSite]:
    """Find every ``field_name.method(arg, ...)`` call and return its first argument."""
    query = load_query(USAGE_QUERY)
    sites: list[UsageSite] = []
    for match in run_query(query, syntax, bindings={"usage.receiver": field_name}):
        argument = match["usage.argument"]
        sites.append(
            UsageSite(
                receiver=syntax.text(match["usage.receiver"]),
                method=syntax.text(match["usage.method"]),
                argument=syntax.text(argument),
                start_byte=argument.start_byte,
                end_byte=argument.end_byte,
                start_point=start_position(argument),
                end_point=end_position(argument),
            )
        )
    return sites
