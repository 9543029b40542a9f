"""Repositories for directory tables.

Operations in ``advocate_directory.ops`` go through these classes instead of
issuing statements on the session directly.
"""

from advocate_directory.core.repositories.advocates import AdvocateRepository

__all__ = ["AdvocateRepository"]
