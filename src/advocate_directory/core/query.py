"""
Search/sort query construction for advocate listings.

Turns a free-text keyword plus a requested sort key and direction into a
SQLAlchemy filter predicate and ``ORDER BY`` clause.

Rules:
    - Direction: only the exact token ``"desc"`` means descending. Anything
      else (``"DESC"``, ``""``, ``None``, garbage) means ascending.
    - Sort key: resolved through :mod:`advocate_directory.core.columns`.
      Unknown keys fall back to ``id`` with the *requested* direction.
    - Keyword: lowercased, LIKE-escaped and wrapped in ``%…%``, then matched
      as a substring against first name, last name, city, degree, the
      serialized specialties, and the text form of phone number and years of
      experience. Any single match qualifies the row.
    - The keyword only ever reaches the database as a bound parameter.

Example::

    >>> query = SearchQuery.from_params(keyword="Anx", sort_by="lastName", sort_dir="desc")
    >>> stmt = build_search_statement(query)
    >>> rows = session.scalars(stmt).all()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy import ColumnElement, Select, Text, UnaryExpression, bindparam, cast, func, or_, select

from advocate_directory.core import columns
from advocate_directory.core.orm.tables import AdvocateTable

LIKE_ESCAPE = "\\"
KEYWORD_PARAM = "keyword"

# Largest listing window the endpoint accepts
MAX_LIMIT = 1000


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def normalize_direction(value: str | None) -> SortDirection:
    """Map a raw direction to :class:`SortDirection`.

    Case-sensitive: ``"desc"`` is descending, ``"DESC"`` is not.
    """
    return SortDirection.DESC if value == SortDirection.DESC.value else SortDirection.ASC


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Requested sort key (public name, may be unknown) and direction."""

    key: str | None = None
    direction: SortDirection = SortDirection.ASC

    @property
    def resolved_key(self) -> str:
        """Public key actually used for ordering after whitelist fallback."""
        if columns.resolve(self.key) is None:
            return columns.DEFAULT_SORT_KEY
        return self.key  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """One listing request: keyword, sort and optional window.

    ``limit=None`` returns every matching row.
    """

    keyword: str | None = None
    sort: SortSpec = field(default_factory=SortSpec)
    limit: int | None = None
    offset: int = 0

    @classmethod
    def from_params(
        cls,
        keyword: str | None = None,
        sort_by: str | None = None,
        sort_dir: str | None = None,
        *,
        limit: int | None = None,
        offset: int = 0,
    ) -> SearchQuery:
        """Build a query from raw (unvalidated) request values."""
        return cls(
            keyword=keyword or None,
            sort=SortSpec(key=sort_by or None, direction=normalize_direction(sort_dir)),
            limit=limit,
            offset=max(offset, 0),
        )


@dataclass(frozen=True, slots=True)
class ListingClause:
    """Validated WHERE predicate (``None`` = match all) and ORDER BY clauses."""

    predicate: ColumnElement[bool] | None
    ordering: tuple[UnaryExpression, ...]


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so user input matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def keyword_pattern(keyword: str) -> str:
    """Lowercase, escape and wrap *keyword* for substring matching."""
    return f"%{escape_like(keyword.lower())}%"


def build_predicate(keyword: str | None) -> ColumnElement[bool] | None:
    """OR across every searchable field, or ``None`` when there is no keyword."""
    if keyword is None or not keyword.strip():
        return None

    k = bindparam(KEYWORD_PARAM, value=keyword_pattern(keyword), type_=Text)

    def like(expr: ColumnElement) -> ColumnElement[bool]:
        return expr.like(k, escape=LIKE_ESCAPE)

    return or_(
        like(func.lower(AdvocateTable.first_name)),
        like(func.lower(AdvocateTable.last_name)),
        like(func.lower(AdvocateTable.city)),
        like(func.lower(AdvocateTable.degree)),
        like(func.lower(cast(AdvocateTable.specialties, Text))),
        like(cast(AdvocateTable.phone_number, Text)),
        like(cast(AdvocateTable.years_of_experience, Text)),
    )


def build_ordering(sort_key: str | None, sort_dir: str | None) -> tuple[UnaryExpression, ...]:
    """ORDER BY for a requested key/direction.

    Non-id sorts get ``id ASC`` as a tiebreaker so equal values keep a
    stable order across requests.
    """
    direction = normalize_direction(sort_dir)
    key = SortSpec(key=sort_key).resolved_key
    column = columns.SORTABLE_COLUMNS[key]
    primary = column.desc() if direction is SortDirection.DESC else column.asc()

    if key == columns.DEFAULT_SORT_KEY:
        return (primary,)
    return (primary, columns.default_column().asc())


def build_listing_query(
    keyword: str | None,
    sort_key: str | None,
    sort_dir: str | None,
) -> ListingClause:
    """Validated predicate and ordering for one listing request."""
    return ListingClause(
        predicate=build_predicate(keyword),
        ordering=build_ordering(sort_key, sort_dir),
    )


def build_search_statement(query: SearchQuery) -> Select[tuple[AdvocateTable]]:
    """Full SELECT for a :class:`SearchQuery`, window included."""
    clause = build_listing_query(query.keyword, query.sort.key, query.sort.direction.value)

    stmt = select(AdvocateTable)
    if clause.predicate is not None:
        stmt = stmt.where(clause.predicate)
    stmt = stmt.order_by(*clause.ordering)

    if query.limit is not None:
        stmt = stmt.limit(query.limit)
    if query.offset:
        stmt = stmt.offset(query.offset)
    return stmt
