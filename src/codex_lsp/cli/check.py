from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from codex_lsp.cli.log_setup import configure_logging
from codex_lsp.config import get_settings
from codex_lsp.core.analysis import DocumentAnalyzer
from codex_lsp.models import AnalysisStatus, DocumentChange
from codex_lsp.publish.memory import InMemoryPublisher

console = Console()


def check(
    path: Annotated[Path, typer.Argument(help="C# source file to analyze.", exists=True, dir_okay=False)],
    interface_name: Annotated[
        str | None, typer.Option(help="Interface whose injected field is tracked (default: ITelemetryLogger).")
    ] = None,
    log_level: Annotated[str | None, typer.Option(help="Log level (default: WARNING).")] = None,
) -> None:
    """Run one analysis pass over a file and print its diagnostics."""
    settings = get_settings(interface_name, log_level or "WARNING")
    configure_logging(settings.log_level)

    publisher = InMemoryPublisher()
    analyzer = DocumentAnalyzer(settings.interface_name, publisher)
    uri = path.resolve().as_uri()
    report = analyzer.handle_change(DocumentChange(uri=uri, text=path.read_text(encoding="utf-8")))

    if report.status is AnalysisStatus.FAILED:
        console.print(f"[red]Analysis failed:[/red] {report.error}")
        raise typer.Exit(code=1)
    if report.status is AnalysisStatus.NO_BINDING:
        console.print(f"No {settings.interface_name} field binding found in {path}")
        return

    console.print(f"Field [bold]{report.field_name}[/bold] bound to {settings.interface_name}")
    table = Table(show_lines=False)
    for header in ("line", "column", "code", "message"):
        table.add_column(header)
    for diagnostic in publisher.diagnostics_for(uri):
        start = diagnostic.range.start
        table.add_row(str(start.row + 1), str(start.column + 1), diagnostic.code, diagnostic.message)
    console.print(table)
    console.print(f"({len(report.diagnostics)} diagnostics)")
