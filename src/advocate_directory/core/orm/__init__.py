"""SQLAlchemy 2.0 ORM layer for the advocate directory.

Modules
-------
base        DirectoryBase (declarative base)
session     Engine factory, DirectorySession, session factory, create_tables
tables      AdvocateTable
"""

from __future__ import annotations

from advocate_directory.core.orm.base import DirectoryBase
from advocate_directory.core.orm.session import (
    DirectorySession,
    create_directory_engine,
    create_tables,
    directory_session_factory,
)
from advocate_directory.core.orm.tables import AdvocateTable

__all__ = [
    "AdvocateTable",
    "DirectoryBase",
    "DirectorySession",
    "create_directory_engine",
    "create_tables",
    "directory_session_factory",
]
