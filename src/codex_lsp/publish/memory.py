from codex_lsp.models import DiagnosticBatch, DiagnosticRecord


class InMemoryPublisher:
    """Keeps every published batch; the latest batch per URI is the current diagnostic set.

    Implements the ``DiagnosticPublisher`` protocol.
    """

    def __init__(self) -> None:
        self.batches: list[DiagnosticBatch] = []
        self._current: dict[str, DiagnosticBatch] = {}

    def publish(self, batch: DiagnosticBatch) -> None:
        self.batches.append(batch)
        self._current[batch.uri] = batch

    def diagnostics_for(self, uri: str) -> list[DiagnosticRecord]:
        batch = self._current.get(uri)
        return list(batch.diagnostics) if batch else []
