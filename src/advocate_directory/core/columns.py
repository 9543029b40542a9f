"""
Column registry: the fixed whitelist of sortable advocate columns.

Maps the public (camelCase) sort keys accepted by the API to ORM columns.
``resolve()`` is the only path from a user-supplied ``sortBy`` value to a
column, so nothing outside this table can ever reach an ``ORDER BY``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from sqlalchemy.orm import InstrumentedAttribute

from advocate_directory.core.orm.tables import AdvocateTable

DEFAULT_SORT_KEY = "id"

SORTABLE_COLUMNS: Mapping[str, InstrumentedAttribute] = MappingProxyType(
    {
        "id": AdvocateTable.id,
        "firstName": AdvocateTable.first_name,
        "lastName": AdvocateTable.last_name,
        "city": AdvocateTable.city,
        "degree": AdvocateTable.degree,
        "yearsOfExperience": AdvocateTable.years_of_experience,
        "phoneNumber": AdvocateTable.phone_number,
        "createdAt": AdvocateTable.created_at,
    }
)


def resolve(name: str | None) -> InstrumentedAttribute | None:
    """Return the column for a public sort key, or ``None`` if not whitelisted."""
    if not name:
        return None
    return SORTABLE_COLUMNS.get(name)


def default_column() -> InstrumentedAttribute:
    """Column used when the requested sort key does not resolve."""
    return SORTABLE_COLUMNS[DEFAULT_SORT_KEY]


def sortable_keys() -> list[str]:
    """Public sort keys, in registry order."""
    return list(SORTABLE_COLUMNS)
