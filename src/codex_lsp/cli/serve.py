from typing import Annotated

import typer
from rich.console import Console

from codex_lsp.cli.log_setup import configure_logging
from codex_lsp.config import get_settings

console = Console(stderr=True)


def serve(
    tcp: Annotated[bool, typer.Option(help="Listen on TCP instead of stdio.")] = False,
    host: Annotated[str, typer.Option(help="TCP host.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="TCP port.")] = 2087,
    interface_name: Annotated[
        str | None, typer.Option(help="Interface whose injected field is tracked (default: ITelemetryLogger).")
    ] = None,
    log_level: Annotated[str | None, typer.Option(help="Log level (default: INFO).")] = None,
) -> None:
    """Start the language server."""
    from codex_lsp.lsp.server import create_language_server

    settings = get_settings(interface_name, log_level)
    configure_logging(settings.log_level)
    server = create_language_server(settings)

    if tcp:
        console.print(f"[green]Starting language server on {host}:{port}[/green] (interface: {settings.interface_name})")
        server.start_tcp(host, port)
    else:
        console.print(f"[green]Starting language server on stdio[/green] (interface: {settings.interface_name})")
        server.start_io()
