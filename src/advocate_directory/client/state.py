"""
Search session state and its pure transition function.

``reduce(state, event)`` never performs I/O: timers and HTTP live in
:class:`~advocate_directory.client.controller.SearchController`, which feeds
the resulting events back through here.

Phases::

    IDLE ──FetchStarted──▶ LOADING ──FetchSucceeded──▶ LOADED
                              │                           │
                              └──FetchFailed──▶ ERRORED ◀─┘ (next fetch → LOADING)

Every fetch carries a sequence number.  Completion events whose number is not
the latest issued are ignored, so a slow superseded response can never
overwrite the result of a newer request.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from advocate_directory.core.query import MAX_LIMIT, SortDirection

FETCH_ERROR_MESSAGE = "Failed to fetch advocates. Please try again."


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass(frozen=True, slots=True)
class SortState:
    key: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True, slots=True)
class ControllerState:
    """Everything the table view needs, as one immutable value.

    Attributes:
        phase: Data-level lifecycle phase.
        search_term: Text currently in the search box (may be ahead of the
            last fetch while the debounce window is open).
        sort: Active sort column and direction, ``None`` before any click.
        rows: Advocates from the latest applied response (camelCase dicts).
        error: User-facing error message, set only in ``ERRORED``.
        show_loader: Visual loading indicator; lags ``LOADING`` by the grace window.
        latest_seq: Sequence number of the most recently started fetch.
        limit: Current infinite-scroll window, ``None`` for unbounded.
        page_size: Window growth per load-more; ``None`` disables windowing.
        has_more: Whether a larger window could return more rows.
    """

    phase: Phase = Phase.IDLE
    search_term: str = ""
    sort: SortState | None = None
    rows: tuple[dict[str, Any], ...] = ()
    error: str | None = None
    show_loader: bool = False
    latest_seq: int = 0
    limit: int | None = None
    page_size: int | None = None
    has_more: bool = False

    @property
    def sort_by(self) -> str | None:
        return self.sort.key if self.sort else None

    @property
    def sort_dir(self) -> str | None:
        return self.sort.direction.value if self.sort else None


# ── Events ───────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class KeywordChanged:
    keyword: str


@dataclass(frozen=True, slots=True)
class SortToggled:
    key: str


@dataclass(frozen=True, slots=True)
class LoadMoreRequested:
    pass


@dataclass(frozen=True, slots=True)
class FetchStarted:
    seq: int
    keyword: str = ""
    sort: SortState | None = None


@dataclass(frozen=True, slots=True)
class LoaderShown:
    seq: int


@dataclass(frozen=True, slots=True)
class FetchSucceeded:
    seq: int
    rows: tuple[dict[str, Any], ...]
    has_more: bool = False


@dataclass(frozen=True, slots=True)
class FetchFailed:
    seq: int
    message: str = FETCH_ERROR_MESSAGE


Event = (
    KeywordChanged
    | SortToggled
    | LoadMoreRequested
    | FetchStarted
    | LoaderShown
    | FetchSucceeded
    | FetchFailed
)


def next_sort(current: SortState | None, key: str) -> SortState:
    """Clicking the ascending-sorted column flips it to descending; anything else sorts ascending."""
    if current is not None and current.key == key and current.direction is SortDirection.ASC:
        return SortState(key=key, direction=SortDirection.DESC)
    return SortState(key=key, direction=SortDirection.ASC)


def reduce(state: ControllerState, event: Event) -> ControllerState:
    """Apply *event* to *state* and return the new state."""
    match event:
        case KeywordChanged(keyword=keyword):
            return replace(state, search_term=keyword, limit=state.page_size)

        case SortToggled(key=key):
            return replace(state, sort=next_sort(state.sort, key), limit=state.page_size)

        case LoadMoreRequested():
            if state.page_size is None:
                return state
            if state.limit is not None and state.limit >= MAX_LIMIT:
                return state
            return replace(state, limit=min((state.limit or 0) + state.page_size, MAX_LIMIT))

        case FetchStarted(seq=seq):
            return replace(state, phase=Phase.LOADING, error=None, latest_seq=seq)

        case LoaderShown(seq=seq):
            if seq != state.latest_seq or state.phase is not Phase.LOADING:
                return state
            return replace(state, show_loader=True)

        case FetchSucceeded(seq=seq, rows=rows, has_more=has_more):
            if seq != state.latest_seq:
                return state
            return replace(
                state,
                phase=Phase.LOADED,
                rows=tuple(rows),
                error=None,
                show_loader=False,
                has_more=has_more,
            )

        case FetchFailed(seq=seq, message=message):
            if seq != state.latest_seq:
                return state
            return replace(
                state,
                phase=Phase.ERRORED,
                rows=(),
                error=message,
                show_loader=False,
                has_more=False,
            )

    raise TypeError(f"Unknown event: {event!r}")
