"""SQLAlchemy engine factory and session helpers.

This module provides:

* ``create_directory_engine``    -- Create a SA engine from a URL.
* ``DirectorySession``           -- Session with ``expire_on_commit=False``.
* ``directory_session_factory``  -- ``sessionmaker`` producing DirectorySession.
* ``create_tables``              -- Create every mapped table (idempotent).
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine as _sa_create_engine
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from advocate_directory.core.orm.base import DirectoryBase


def create_directory_engine(
    url: str = "sqlite:///advocates.db",
    *,
    echo: bool = False,
    pool_size: int | None = None,
    max_overflow: int | None = None,
    **kwargs: Any,
) -> Engine:
    """Create a SQLAlchemy engine with sane defaults.

    Parameters
    ----------
    url:
        Database URL (``sqlite:///…``, ``postgresql+psycopg://…``, etc.)
    echo:
        If ``True``, log all SQL.
    pool_size, max_overflow:
        Connection pool parameters (ignored for SQLite).
    **kwargs:
        Extra arguments forwarded to ``sqlalchemy.create_engine``.
    """

    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        # In-memory databases live per connection; share a single one
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs.setdefault("poolclass", StaticPool)

        engine = _sa_create_engine(url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection: Any, _rec: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    pool_kwargs: dict[str, Any] = {}
    if pool_size is not None:
        pool_kwargs["pool_size"] = pool_size
    if max_overflow is not None:
        pool_kwargs["max_overflow"] = max_overflow

    return _sa_create_engine(url, echo=echo, **pool_kwargs, **kwargs)


class DirectorySession(Session):
    """Pre-configured session with ``expire_on_commit=False``.

    Rows returned by a committed seed stay readable after the commit.
    """

    def __init__(self, bind: Engine | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("expire_on_commit", False)
        super().__init__(bind=bind, **kwargs)


def directory_session_factory(engine: Engine) -> sessionmaker[DirectorySession]:
    """Return a ``sessionmaker`` bound to *engine* that produces ``DirectorySession`` instances."""
    return sessionmaker(bind=engine, class_=DirectorySession)


def create_tables(engine: Engine) -> list[str]:
    """Create all mapped tables that do not exist yet; return their names."""
    DirectoryBase.metadata.create_all(engine)
    return sorted(DirectoryBase.metadata.tables)
