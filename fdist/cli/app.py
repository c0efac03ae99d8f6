from __future__ import annotations

import typer

from fdist.cli.commands.build_cmd import build

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Single command: its options are the top-level flags of `fdist`.
app.command(no_args_is_help=True)(build)


def main() -> None:
    app()
