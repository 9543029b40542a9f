"""
Advocate API schemas and response envelopes.

Envelope conventions:
    - Listing success: ``{"success": true, "data": {"data": [Advocate, ...]}}``
    - Seed success: ``{"success": true, "message": ..., "count": n, "records": [...]}``
    - Any failure: ``{"success": false, "error": "<generic message>"}`` (HTTP 500)

Field names are camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AdvocateSchema(BaseModel):
    """Advocate representation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: Any = Field(default_factory=list, description="Ordered specialty tags")
    years_of_experience: int
    phone_number: int
    created_at: datetime | None = None


class AdvocateList(BaseModel):
    """Inner payload of a listing response."""

    data: list[AdvocateSchema]


class ListingEnvelope(BaseModel):
    """Success envelope for ``GET /advocates``."""

    success: Literal[True] = True
    data: AdvocateList


class SeedEnvelope(BaseModel):
    """Success envelope for ``POST /seed``."""

    success: Literal[True] = True
    message: str
    count: int
    records: list[AdvocateSchema]


class ErrorEnvelope(BaseModel):
    """Failure envelope; ``error`` is always a generic, user-safe message."""

    success: Literal[False] = False
    error: str
