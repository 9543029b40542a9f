"""
Search controller: the side-effecting shell around :func:`~advocate_directory.client.state.reduce`.

Owns the timers and network calls for one search session:

- **Debounce**: each keystroke cancels the pending scheduled fetch and
  schedules a new one ``debounce_seconds`` later; only the last keyword
  fires.  A fetch that already started is never cancelled.
- **Loader grace**: the visual loader is only switched on if the request is
  still outstanding after ``loader_grace_seconds``.
- **Sort clicks** fetch immediately with the current keyword.
- **Load more**: the infinite-scroll trigger grows the window by
  ``page_size`` and refetches; rows are replaced wholesale.

Usage::

    async with DirectoryClient("http://localhost:8000") as client:
        controller = SearchController(client, RichTableRenderer())
        await controller.mount()
        controller.on_keyword_change("anx")
        await controller.wait_idle()
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, Protocol

from advocate_directory.client.render import Renderer
from advocate_directory.client.scroll import InfiniteScrollTrigger
from advocate_directory.client.state import (
    ControllerState,
    Event,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    KeywordChanged,
    LoaderShown,
    LoadMoreRequested,
    Phase,
    SortToggled,
    reduce,
)
from advocate_directory.core.errors import FetchError
from advocate_directory.core.logging import get_logger
from advocate_directory.core.query import MAX_LIMIT

logger = get_logger(__name__)

DEBOUNCE_SECONDS = 0.3
LOADER_GRACE_SECONDS = 0.2


class ListingSource(Protocol):
    """What the controller needs from :class:`~advocate_directory.client.directory_client.DirectoryClient`."""

    async def list_advocates(
        self,
        keyword: str = "",
        sort_by: str | None = None,
        sort_dir: str | None = None,
        *,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]: ...


class SearchController:
    """Drives one search session against the listing endpoint."""

    def __init__(
        self,
        client: ListingSource,
        renderer: Renderer | None = None,
        *,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        loader_grace_seconds: float = LOADER_GRACE_SECONDS,
        page_size: int | None = None,
        scroll_threshold: float = 1.0,
    ) -> None:
        self.client = client
        self.renderer = renderer
        self.debounce_seconds = debounce_seconds
        self.loader_grace_seconds = loader_grace_seconds
        if page_size is not None:
            page_size = min(page_size, MAX_LIMIT)
        self.state = ControllerState(limit=page_size, page_size=page_size)
        self.scroll = InfiniteScrollTrigger(
            on_load_more=self._schedule_load_more,
            threshold=scroll_threshold,
        )

        self._seq = 0
        self._debounce_task: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    # ------------------------------------------------------------------ #
    # State plumbing
    # ------------------------------------------------------------------ #

    def dispatch(self, event: Event) -> ControllerState:
        """Apply *event*, sync the scroll trigger and re-render."""
        self.state = reduce(self.state, event)
        self.scroll.has_more = self.state.has_more
        if self.renderer is not None:
            self.renderer.render(self.state)
        return self.state

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    # ------------------------------------------------------------------ #
    # UI events
    # ------------------------------------------------------------------ #

    async def mount(self) -> None:
        """Initial load with no keyword and no sort."""
        await self.fetch()

    def on_keyword_change(self, keyword: str) -> None:
        """Record the new search text and (re)start the debounce window."""
        self.dispatch(KeywordChanged(keyword))
        if self._debounce_task is not None and not self._debounce_task.done():
            self._debounce_task.cancel()
        self._debounce_task = asyncio.get_running_loop().create_task(self._debounced_fetch())

    async def _debounced_fetch(self) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # Detached so a later keystroke cannot cancel a request in flight
        self._spawn(self.fetch())

    async def on_sort_click(self, key: str) -> None:
        """Toggle the sort for *key* and fetch with the current keyword."""
        self.dispatch(SortToggled(key))
        await self.fetch()

    async def load_more(self) -> None:
        """Grow the window by one page and refetch, if more rows exist."""
        if not self.state.has_more or self.state.phase is Phase.LOADING:
            return
        self.dispatch(LoadMoreRequested())
        await self.fetch()

    def _schedule_load_more(self) -> None:
        self._spawn(self.load_more())

    # ------------------------------------------------------------------ #
    # Fetching
    # ------------------------------------------------------------------ #

    async def fetch(self) -> None:
        """Issue one listing request for the current state and apply the outcome."""
        self._seq += 1
        seq = self._seq
        snapshot = self.dispatch(FetchStarted(seq, self.state.search_term, self.state.sort))

        loader = asyncio.get_running_loop().call_later(
            self.loader_grace_seconds, self.dispatch, LoaderShown(seq)
        )
        try:
            rows = await self.client.list_advocates(
                snapshot.search_term,
                snapshot.sort_by,
                snapshot.sort_dir,
                limit=snapshot.limit,
            )
        except FetchError as exc:
            logger.warning("advocate_fetch_failed", seq=seq, **exc.to_dict())
            self.dispatch(FetchFailed(seq))
            return
        finally:
            loader.cancel()

        if seq != self.state.latest_seq:
            logger.debug("stale_response_dropped", seq=seq, latest_seq=self.state.latest_seq)
        # Window is capped at MAX_LIMIT
        has_more = snapshot.limit is not None and snapshot.limit < MAX_LIMIT and len(rows) >= snapshot.limit
        self.dispatch(FetchSucceeded(seq, tuple(rows), has_more))

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    async def wait_idle(self) -> None:
        """Wait until no debounce window is open and no fetch is outstanding."""
        while True:
            pending = [
                task
                for task in (self._debounce_task, *self._tasks)
                if task is not None and not task.done()
            ]
            if not pending:
                return
            done, _ = await asyncio.wait(pending)
            for task in done:
                if not task.cancelled() and task.exception() is not None:
                    raise task.exception()  # type: ignore[misc]

    async def aclose(self) -> None:
        """Cancel the debounce window and any outstanding fetches."""
        tasks = [t for t in (self._debounce_task, *self._tasks) if t is not None and not t.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.wait(tasks)
