"""Per-document analysis pass: parse, find the bound field, find its calls, publish.

Each pass owns its syntax tree and nothing survives it except what is handed
to the publisher. A failing pass publishes nothing and leaves the analyzer
ready for the next change.
"""

import logging
from enum import Enum

from codex_lsp.core.bindings import locate_field_binding
from codex_lsp.core.diagnostics import build_diagnostics
from codex_lsp.core.errors import AnalysisError
from codex_lsp.core.ports.publisher import DiagnosticPublisher
from codex_lsp.core.syntax import parse_document
from codex_lsp.core.usages import locate_usage_sites
from codex_lsp.models import AnalysisReport, AnalysisStatus, DiagnosticBatch, DocumentChange

logger = logging.getLogger(__name__)


class AnalyzerState(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"


class DocumentAnalyzer:
    def __init__(self, interface_name: str, publisher: DiagnosticPublisher) -> None:
        self.interface_name = interface_name
        self._publisher = publisher
        self.state = AnalyzerState.IDLE

    def handle_change(self, change: DocumentChange) -> AnalysisReport:
        if self.state is AnalyzerState.ANALYZING:
            raise RuntimeError(f"Analysis already in progress; refusing {change.uri}")

        self.state = AnalyzerState.ANALYZING
        try:
            report = self._analyze(change)
        except AnalysisError as exc:
            logger.error("Analysis of %s failed (%s): %s", change.uri, exc.kind, exc)
            return AnalysisReport(uri=change.uri, status=AnalysisStatus.FAILED, error=f"{exc.kind}: {exc}")
        finally:
            self.state = AnalyzerState.IDLE

        self._publisher.publish(DiagnosticBatch(uri=change.uri, diagnostics=report.diagnostics, version=change.version))
        logger.info("Published %d diagnostic(s) for %s", len(report.diagnostics), change.uri)
        return report

    def _analyze(self, change: DocumentChange) -> AnalysisReport:
        syntax = parse_document(change.text)

        field_name = locate_field_binding(syntax, self.interface_name)
        if field_name is None:
            logger.info("No %s field binding in %s", self.interface_name, change.uri)
            return AnalysisReport(uri=change.uri, status=AnalysisStatus.NO_BINDING)

        sites = locate_usage_sites(syntax, field_name)
        return AnalysisReport(
            uri=change.uri,
            status=AnalysisStatus.OK,
            field_name=field_name,
            diagnostics=build_diagnostics(sites),
        )
