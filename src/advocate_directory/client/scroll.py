"""Infinite-scroll trigger.

Stands in for a browser ``IntersectionObserver`` on a sentinel element below
the table: the view reports how much of the sentinel is visible and the
trigger asks for more rows once it is at least ``threshold`` visible.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class InfiniteScrollTrigger:
    """Calls ``on_load_more`` when the sentinel intersects and more rows exist.

    Attributes:
        on_load_more: Callback invoked to load the next window.
        has_more: Whether another window is available; kept in sync by the owner.
        threshold: Fraction of the sentinel that must be visible (0.0-1.0).
    """

    on_load_more: Callable[[], Any]
    has_more: bool = False
    threshold: float = 1.0

    def load_more(self) -> bool:
        """Request the next window if there is one.  Returns whether it fired."""
        if not self.has_more:
            return False
        self.on_load_more()
        return True

    def observe(self, intersection_ratio: float) -> bool:
        """Report the sentinel's visible fraction.  Returns whether a load fired."""
        if intersection_ratio >= self.threshold:
            return self.load_more()
        return False
