import typer

from codex_lsp.cli.check import check
from codex_lsp.cli.serve import serve

app = typer.Typer(
    name="codex-lsp",
    help="Codex LSP: flag calls through constructor-injected C# dependencies.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.command("check")(check)


def main() -> None:
    app()
