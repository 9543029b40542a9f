"""
CLI: ``advocates seed`` / ``search`` / ``browse``.
"""

from __future__ import annotations

import asyncio

import typer
from rich.prompt import Prompt

from advocate_directory.cli.utils import console, fail, operation_context, output_advocates
from advocate_directory.client import DirectoryClient, RichTableRenderer, SearchController
from advocate_directory.client.directory_client import DEFAULT_BASE_URL
from advocate_directory.core.columns import sortable_keys
from advocate_directory.core.errors import StorageError
from advocate_directory.core.query import SearchQuery
from advocate_directory.ops import list_advocates, seed_advocates

BROWSE_HELP = (
    "[dim]Type to search.  :sort <key> toggles a sort column, :more loads the next page,"
    " :clear resets the keyword, :q quits.[/dim]"
)


def seed(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
) -> None:
    """Replace all advocates with the built-in dataset."""
    with operation_context(database) as ctx:
        try:
            result = seed_advocates(ctx)
        except StorageError as exc:
            fail(exc)
    console.print(f"[bold green]{result.message}[/bold green] ({result.count} advocates)")


def search(
    keyword: str = typer.Argument("", help="Substring matched across every field"),
    sort_by: str | None = typer.Option(None, "--sort-by", "-s", help="Sort column (camelCase)"),
    sort_dir: str = typer.Option("asc", "--sort-dir", help="asc or desc"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Maximum rows"),
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Search advocates directly against the database."""
    query = SearchQuery.from_params(keyword, sort_by, sort_dir.lower(), limit=limit)
    with operation_context(database) as ctx:
        try:
            records = list_advocates(ctx, query)
        except StorageError as exc:
            fail(exc)
    output_advocates(records, as_json=json_out, title="Advocates")


def browse(
    url: str = typer.Option(DEFAULT_BASE_URL, "--url", "-u", help="API base URL"),
    page_size: int | None = typer.Option(None, "--page-size", min=1, help="Rows per page"),
) -> None:
    """Interactive search against a running API server."""
    asyncio.run(_browse(url, page_size))


async def _browse(url: str, page_size: int | None) -> None:
    renderer = RichTableRenderer(console, clear=True)
    async with DirectoryClient(url) as client:
        controller = SearchController(client, renderer, page_size=page_size)
        try:
            await controller.mount()
            while True:
                console.print(BROWSE_HELP)
                line = await asyncio.to_thread(Prompt.ask, "search", console=console, default="")
                command = line.strip()

                if command in (":q", ":quit"):
                    break
                if command == ":more":
                    controller.scroll.load_more()
                elif command == ":clear":
                    controller.on_keyword_change("")
                elif command.startswith(":sort"):
                    key = command.removeprefix(":sort").strip()
                    if key not in sortable_keys():
                        console.print(f"[yellow]Sortable keys:[/yellow] {', '.join(sortable_keys())}")
                        continue
                    await controller.on_sort_click(key)
                else:
                    controller.on_keyword_change(line)
                await controller.wait_idle()
        finally:
            await controller.aclose()
