from typing import Protocol

from codex_lsp.models import DiagnosticBatch


class DiagnosticPublisher(Protocol):
    def publish(self, batch: DiagnosticBatch) -> None: ...
