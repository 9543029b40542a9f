"""
Client side of the advocate directory: HTTP client, search controller and
terminal renderer.
"""

from advocate_directory.client.controller import SearchController
from advocate_directory.client.directory_client import DirectoryClient
from advocate_directory.client.render import Renderer, RichTableRenderer
from advocate_directory.client.scroll import InfiniteScrollTrigger
from advocate_directory.client.state import (
    FETCH_ERROR_MESSAGE,
    ControllerState,
    Phase,
    SortState,
    reduce,
)

__all__ = [
    "FETCH_ERROR_MESSAGE",
    "ControllerState",
    "DirectoryClient",
    "InfiniteScrollTrigger",
    "Phase",
    "Renderer",
    "RichTableRenderer",
    "SearchController",
    "SortState",
    "reduce",
]
