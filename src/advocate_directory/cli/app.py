"""
Root Typer application for the ``advocates`` CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from advocate_directory import __version__
from advocate_directory.config import get_settings
from advocate_directory.core.logging import configure_logging, json_format_for

app = Typer(
    name="advocates",
    help="advocates: search, seed and serve the advocate directory.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"advocate-directory {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
) -> None:
    """advocates CLI: manage the directory database and query it."""
    configure_logging(level=log_level, json_format=json_format_for(get_settings().log_format))


# ── Sub-command registration ─────────────────────────────────────────────

from advocate_directory.cli.advocates import browse, search, seed  # noqa: E402
from advocate_directory.cli.db import app as db_app  # noqa: E402
from advocate_directory.cli.serve import serve  # noqa: E402

app.add_typer(db_app, name="db", help="Database operations.")
app.command("seed")(seed)
app.command("search")(search)
app.command("browse")(browse)
app.command("serve")(serve)
