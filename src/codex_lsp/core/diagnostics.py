from collections.abc import Iterable

from codex_lsp.models import DiagnosticRecord, Range, Severity, UsageSite

DIAGNOSTIC_CODE = "CUS1234"
DIAGNOSTIC_SOURCE = "codex-lsp"
DIAGNOSTIC_DOCS_URL = "https://google.com"
MESSAGE_PREFIX = "Matched: "


def build_diagnostic(site: UsageSite) -> DiagnosticRecord:
    # Rows and columns are copied from the tree as-is (zero-based, byte columns).
    return DiagnosticRecord(
        range=Range(start=site.start_point, end=site.end_point),
        severity=Severity.INFORMATION,
        code=DIAGNOSTIC_CODE,
        code_description_href=DIAGNOSTIC_DOCS_URL,
        source=DIAGNOSTIC_SOURCE,
        message=f"{MESSAGE_PREFIX}{site.argument}",
    )


def build_diagnostics(sites: Iterable[UsageSite]) -> list[DiagnosticRecord]:
    return [build_diagnostic(site) for site in sites]
