"""Shared fixtures: in-memory SQLite engine, session, OperationContext and sample advocates."""

from __future__ import annotations

import json
from typing import Any

import pytest

from advocate_directory.config import reset_settings
from advocate_directory.core.orm import create_directory_engine, create_tables, directory_session_factory
from advocate_directory.ops.advocates import seed_advocates
from advocate_directory.ops.context import OperationContext

SAMPLE_ADVOCATES: tuple[dict[str, Any], ...] = (
    {
        "first_name": "Ava",
        "last_name": "Nguyen",
        "city": "Boston",
        "degree": "Certified Attendant",
        "specialties": ["Sleep issues"],
        "years_of_experience": 2,
        "phone_number": 6175550101,
    },
    {
        "first_name": "Brian",
        "last_name": "Okafor",
        "city": "Denver",
        "degree": "MD",
        "specialties": ["General Mental Health (anxiety, depression)"],
        "years_of_experience": 15,
        "phone_number": 3035550102,
    },
    {
        "first_name": "Carla",
        "last_name": "Diaz",
        "city": "Austin",
        "degree": "PhD",
        "specialties": ["Trauma & PTSD", "Chronic pain"],
        "years_of_experience": 7,
        "phone_number": 5125550103,
    },
    {
        "first_name": "Derek",
        "last_name": "Zimmer",
        "city": "Boston",
        "degree": "MSW",
        "specialties": ["Eating disorders"],
        "years_of_experience": 7,
        "phone_number": 6175550104,
    },
    {
        "first_name": "Erin",
        "last_name": "Abbott",
        "city": "St. Louis",
        "degree": "MD",
        "specialties": ["Substance use/abuse"],
        "years_of_experience": 30,
        "phone_number": 3145550105,
    },
)


def sample_records() -> list[dict[str, Any]]:
    return [{**r, "specialties": list(r["specialties"])} for r in SAMPLE_ADVOCATES]


def matches_keyword(advocate: dict[str, Any], keyword: str) -> bool:
    """Reference matcher over the seven searchable fields (camelCase advocate dict)."""
    needle = keyword.lower()
    haystacks = (
        advocate["firstName"].lower(),
        advocate["lastName"].lower(),
        advocate["city"].lower(),
        advocate["degree"].lower(),
        json.dumps(advocate["specialties"]).lower(),
        str(advocate["phoneNumber"]),
        str(advocate["yearsOfExperience"]),
    )
    return any(needle in h for h in haystacks)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def engine():
    """Shared in-memory SQLite engine with the schema created."""
    eng = create_directory_engine("sqlite://")
    create_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine):
    s = directory_session_factory(engine)()
    yield s
    s.close()


@pytest.fixture()
def ctx(session) -> OperationContext:
    """Default OperationContext wired to the in-memory session."""
    return OperationContext(session=session, caller="test")


@pytest.fixture()
def seeded_ctx(ctx) -> OperationContext:
    """OperationContext whose database holds ``SAMPLE_ADVOCATES``."""
    seed_advocates(ctx, sample_records())
    return ctx
