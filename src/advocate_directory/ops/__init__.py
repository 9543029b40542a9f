"""
Operations layer: transport-agnostic listing and seed functions.

Every operation takes an :class:`~advocate_directory.ops.context.OperationContext`
first.  The API routers and the CLI are thin adapters over these functions.
"""

from advocate_directory.ops.advocates import count_advocates, list_advocates, seed_advocates
from advocate_directory.ops.context import OperationContext

__all__ = ["OperationContext", "count_advocates", "list_advocates", "seed_advocates"]
