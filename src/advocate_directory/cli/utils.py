"""
CLI utility helpers: output formatting and session management.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from advocate_directory.config import get_settings
from advocate_directory.core.errors import DirectoryError
from advocate_directory.core.orm import create_directory_engine, create_tables, directory_session_factory
from advocate_directory.ops.context import OperationContext
from advocate_directory.ops.responses import AdvocateRecord

console = Console()
err_console = Console(stderr=True)


# ── Session helper ───────────────────────────────────────────────────────


@contextmanager
def operation_context(database: str | None = None, *, init: bool = True) -> Iterator[OperationContext]:
    """Open a session on *database* (settings default) wrapped in an ``OperationContext``.

    The engine is disposed and the session closed on exit.
    """
    settings = get_settings()
    engine = create_directory_engine(database or settings.database_url, echo=settings.database_echo)
    try:
        if init:
            create_tables(engine)
        session = directory_session_factory(engine)()
        try:
            yield OperationContext(session=session, caller="cli")
        finally:
            session.close()
    finally:
        engine.dispose()


def fail(exc: DirectoryError) -> None:
    """Print a directory error and exit non-zero."""
    err_console.print(f"[bold red]Error[/bold red] ({exc.category.value}): {exc.message}")
    raise typer.Exit(code=1) from exc


# ── Output helpers ───────────────────────────────────────────────────────

ADVOCATE_COLUMNS: tuple[str, ...] = (
    "id",
    "firstName",
    "lastName",
    "city",
    "degree",
    "specialties",
    "yearsOfExperience",
    "phoneNumber",
)


def output_advocates(
    records: Sequence[AdvocateRecord],
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render advocate records as JSON or a Rich table."""
    items = [record.to_public_dict() for record in records]

    if as_json:
        console.print_json(json.dumps(items, default=str))
        return

    if not items:
        console.print("[dim]No advocates found.[/dim]")
        return

    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in ADVOCATE_COLUMNS:
        table.add_column(col, overflow="fold")
    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in ADVOCATE_COLUMNS))
    console.print(table)
    console.print(f"\n[dim]{len(items)} advocate(s)[/dim]")


def _cell(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return "" if value is None else str(value)
