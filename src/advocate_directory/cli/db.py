"""
CLI: ``advocates db``: database management commands.
"""

from __future__ import annotations

import typer

from advocate_directory.cli.utils import console, fail, operation_context
from advocate_directory.config import get_settings
from advocate_directory.core.errors import StorageError
from advocate_directory.core.orm import create_directory_engine, create_tables
from advocate_directory.ops import count_advocates

app = typer.Typer(no_args_is_help=True)


@app.command()
def init(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
) -> None:
    """Initialise database schema (create tables)."""
    engine = create_directory_engine(database or get_settings().database_url)
    try:
        created = create_tables(engine)
    finally:
        engine.dispose()
    console.print(f"[bold green]Tables ready:[/bold green] {', '.join(created)}")


@app.command()
def count(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
) -> None:
    """Show the number of stored advocates."""
    with operation_context(database) as ctx:
        try:
            total = count_advocates(ctx)
        except StorageError as exc:
            fail(exc)
    console.print(f"advocates: {total}")
