import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str) -> None:
    # stdout is the LSP channel in stdio mode, so logs always go to stderr.
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
