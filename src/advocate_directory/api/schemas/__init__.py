"""Pydantic request/response schemas for the HTTP API."""

from advocate_directory.api.schemas.advocates import (
    AdvocateList,
    AdvocateSchema,
    ErrorEnvelope,
    ListingEnvelope,
    SeedEnvelope,
)

__all__ = [
    "AdvocateList",
    "AdvocateSchema",
    "ErrorEnvelope",
    "ListingEnvelope",
    "SeedEnvelope",
]
