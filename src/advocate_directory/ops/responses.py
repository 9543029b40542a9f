"""
Typed response objects for operations.

Responses carry only domain data: no HTTP status codes, no CLI formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from advocate_directory.core.orm.tables import AdvocateTable


@dataclass(frozen=True, slots=True)
class AdvocateRecord:
    """Read-only view of one advocate row."""

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: list[str]
    years_of_experience: int
    phone_number: int
    created_at: datetime | None

    @classmethod
    def from_row(cls, row: AdvocateTable) -> AdvocateRecord:
        return cls(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            city=row.city,
            degree=row.degree,
            specialties=list(row.specialties or []),
            years_of_experience=row.years_of_experience,
            phone_number=row.phone_number,
            created_at=row.created_at,
        )

    def to_public_dict(self) -> dict[str, Any]:
        """camelCase mapping matching the API's advocate JSON shape."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "city": self.city,
            "degree": self.degree,
            "specialties": list(self.specialties),
            "yearsOfExperience": self.years_of_experience,
            "phoneNumber": self.phone_number,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True, slots=True)
class SeedResult:
    """Result payload for :func:`advocate_directory.ops.advocates.seed_advocates`."""

    message: str
    count: int
    records: list[AdvocateRecord]
    deleted: int = 0
