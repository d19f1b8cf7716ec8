"""pygls language server exposing the analyzer over LSP."""

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_CODE_ACTION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_HOVER,
    CodeAction,
    CodeActionKind,
    CodeActionOptions,
    CodeActionParams,
    CodeDescription,
    Command,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    Hover,
    HoverParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from codex_lsp.config import Settings
from codex_lsp.core.analysis import DocumentAnalyzer
from codex_lsp.models import DiagnosticBatch, DiagnosticRecord, DocumentChange

logger = logging.getLogger(__name__)

SERVER_NAME = "codex-lsp"
SERVER_VERSION = "0.1.0"
FAKE_DIAGNOSTICS_COMMAND = "fake"


def to_lsp_diagnostic(record: DiagnosticRecord) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=record.range.start.row, character=record.range.start.column),
            end=Position(line=record.range.end.row, character=record.range.end.column),
        ),
        message=record.message,
        severity=DiagnosticSeverity(int(record.severity)),
        code=record.code,
        code_description=CodeDescription(href=record.code_description_href),
        source=record.source,
    )


class LspDiagnosticPublisher:
    """Sends batches as ``textDocument/publishDiagnostics`` notifications.

    Implements the ``DiagnosticPublisher`` protocol.
    """

    def __init__(self, server: LanguageServer) -> None:
        self._server = server

    def publish(self, batch: DiagnosticBatch) -> None:
        self._server.text_document_publish_diagnostics(
            PublishDiagnosticsParams(
                uri=batch.uri,
                diagnostics=[to_lsp_diagnostic(d) for d in batch.diagnostics],
                version=batch.version,
            )
        )


class CodexLanguageServer(LanguageServer):
    def __init__(self, settings: Settings) -> None:
        super().__init__(SERVER_NAME, SERVER_VERSION, text_document_sync_kind=TextDocumentSyncKind.Full)
        self.settings = settings
        self.analyzer = DocumentAnalyzer(settings.interface_name, LspDiagnosticPublisher(self))


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def did_change(ls: CodexLanguageServer, params: DidChangeTextDocumentParams) -> None:
    uri = params.text_document.uri
    if not params.content_changes:
        logger.warning("Change notification for %s carried no content", uri)
        return
    # Full sync: the last change holds the whole document.
    change = DocumentChange(uri=uri, text=params.content_changes[-1].text, version=params.text_document.version)
    ls.analyzer.handle_change(change)


def hover(ls: CodexLanguageServer, params: HoverParams) -> Hover:
    logger.debug("Hover at %s:%d:%d", params.text_document.uri, params.position.line, params.position.character)
    return Hover(contents="hello world")


def code_action(ls: CodexLanguageServer, params: CodeActionParams) -> list[CodeAction]:
    uri = params.text_document.uri
    return [
        CodeAction(
            title="test code action",
            kind=CodeActionKind.QuickFix,
            command=Command(title="fakediagnostics", command=FAKE_DIAGNOSTICS_COMMAND, arguments=[uri]),
            is_preferred=False,
        )
    ]


def fake_diagnostics(ls: CodexLanguageServer, uri: str) -> None:
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(
            uri=uri,
            diagnostics=[
                Diagnostic(
                    range=Range(start=Position(line=1, character=1), end=Position(line=1, character=2)),
                    message="placeholder diagnostic",
                    severity=DiagnosticSeverity.Error,
                )
            ],
        )
    )


def create_language_server(settings: Settings) -> CodexLanguageServer:
    """Create a language server wired to an analyzer for ``settings.interface_name``."""
    server = CodexLanguageServer(settings)
    server.feature(TEXT_DOCUMENT_DID_CHANGE)(did_change)
    server.feature(TEXT_DOCUMENT_HOVER)(hover)
    server.feature(TEXT_DOCUMENT_CODE_ACTION, CodeActionOptions(code_action_kinds=[CodeActionKind.QuickFix]))(
        code_action
    )
    server.command(FAKE_DIAGNOSTICS_COMMAND)(fake_diagnostics)
    return server
