"""
Terminal rendering of the search view with rich.
"""

from __future__ import annotations

from typing import Any, Protocol

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from advocate_directory.client.state import ControllerState, Phase
from advocate_directory.core.query import SortDirection

# (public key, header label), in display order
TABLE_COLUMNS: tuple[tuple[str, str], ...] = (
    ("firstName", "First Name"),
    ("lastName", "Last Name"),
    ("city", "City"),
    ("degree", "Degree"),
    ("specialties", "Specialties"),
    ("yearsOfExperience", "Experience"),
    ("phoneNumber", "Phone"),
)

UNSORTED_ICON = "↕"
ASC_ICON = "↑"
DESC_ICON = "↓"

LOADING_MESSAGE = "Loading results..."
EMPTY_MESSAGE = "No advocates found."


class Renderer(Protocol):
    """Render collaborator, called after every state change."""

    def render(self, state: ControllerState) -> None: ...


def sort_icon(state: ControllerState, key: str) -> str:
    if state.sort is None or state.sort.key != key:
        return UNSORTED_ICON
    return DESC_ICON if state.sort.direction is SortDirection.DESC else ASC_ICON


def format_cell(key: str, value: Any) -> str:
    if value is None:
        return ""
    if key == "specialties" and isinstance(value, list | tuple):
        return ", ".join(str(v) for v in value)
    return str(value)


def build_table(state: ControllerState) -> Table:
    """Advocate table with a sort icon beside each header."""
    table = Table(show_lines=False, pad_edge=False)
    for key, label in TABLE_COLUMNS:
        table.add_column(f"{label} {sort_icon(state, key)}", overflow="fold")
    for row in state.rows:
        table.add_row(*(format_cell(key, row.get(key)) for key, _ in TABLE_COLUMNS))
    return table


def build_view(state: ControllerState) -> RenderableType:
    """Status lines plus the table for one state."""
    parts: list[RenderableType] = []
    if state.search_term:
        parts.append(Text(f"Searching for: {state.search_term}", style="bold"))
    if state.show_loader:
        parts.append(Text(LOADING_MESSAGE, style="dim"))
    if state.error:
        parts.append(Text(state.error, style="bold red"))

    parts.append(build_table(state))

    if state.phase is not Phase.LOADING and not state.rows and not state.error:
        parts.append(Text(EMPTY_MESSAGE, style="dim"))
    if state.has_more:
        parts.append(Text(f"Showing {len(state.rows)}, more available", style="dim"))
    return Group(*parts)


class RichTableRenderer:
    """Prints the full view to a rich console on every state change."""

    def __init__(self, console: Console | None = None, *, clear: bool = False) -> None:
        self.console = console or Console()
        self.clear = clear

    def render(self, state: ControllerState) -> None:
        if self.clear:
            self.console.clear()
        self.console.print(build_view(state))
