"""Advocate repository: select, count, delete-all and bulk insert.

Tags:
    repository, advocates, sqlalchemy
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import Select, delete, func, select
from sqlalchemy.orm import Session

from advocate_directory.core.orm.tables import AdvocateTable


class AdvocateRepository:
    """Data access for the ``advocates`` table over a SQLAlchemy session.

    The repository never commits; transaction boundaries belong to the
    calling operation.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def search(self, statement: Select[tuple[AdvocateTable]]) -> list[AdvocateTable]:
        """Run a prepared SELECT (see :func:`~advocate_directory.core.query.build_search_statement`)."""
        return list(self.session.scalars(statement).all())

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(AdvocateTable)) or 0

    def delete_all(self) -> int:
        """Delete every advocate.  Returns the number of rows removed."""
        result = self.session.execute(delete(AdvocateTable))
        return result.rowcount or 0

    def insert_many(self, records: Iterable[Mapping[str, Any]]) -> list[AdvocateTable]:
        """Insert *records* and return the persisted rows (ids and ``created_at`` populated)."""
        rows = [AdvocateTable(**dict(record)) for record in records]
        self.session.add_all(rows)
        self.session.flush()
        return rows
