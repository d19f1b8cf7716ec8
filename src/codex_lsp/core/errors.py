class AnalysisError(Exception):
    """Base class for failures that abort a single analysis pass."""

    kind = "analysis_error"


class ParseFailure(AnalysisError):
    """The parser produced no tree at all."""

    kind = "parse_failure"


class QueryCompileFailure(AnalysisError):
    """A structural query could not be loaded or compiled against the grammar."""

    kind = "query_compile_failure"
