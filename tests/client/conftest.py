"""Fixtures for client tests: a fake listing server behind ``httpx.MockTransport``."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest

from advocate_directory.client.state import ControllerState
from advocate_directory.core.query import MAX_LIMIT

ROWS: tuple[dict[str, Any], ...] = (
    {"id": 1, "firstName": "Ava", "lastName": "Nguyen", "city": "Boston", "degree": "Certified Attendant",
     "specialties": ["Sleep issues"], "yearsOfExperience": 2, "phoneNumber": 6175550101},
    {"id": 2, "firstName": "Brian", "lastName": "Okafor", "city": "Denver", "degree": "MD",
     "specialties": ["Anxiety"], "yearsOfExperience": 15, "phoneNumber": 3035550102},
    {"id": 3, "firstName": "Carla", "lastName": "Diaz", "city": "Austin", "degree": "PhD",
     "specialties": ["Trauma & PTSD"], "yearsOfExperience": 7, "phoneNumber": 5125550103},
    {"id": 4, "firstName": "Derek", "lastName": "Zimmer", "city": "Boston", "degree": "MSW",
     "specialties": ["Eating disorders"], "yearsOfExperience": 7, "phoneNumber": 6175550104},
    {"id": 5, "firstName": "Erin", "lastName": "Abbott", "city": "St. Louis", "degree": "MD",
     "specialties": ["Substance use/abuse"], "yearsOfExperience": 30, "phoneNumber": 3145550105},
)


class FakeListingServer:
    """Serves ``GET /advocates`` from ``ROWS`` with optional per-keyword delays."""

    def __init__(self) -> None:
        self.requests: list[dict[str, str]] = []
        self.delay = 0.0
        self.delays: dict[str, float] = {}
        self.fail = False
        self.rows: list[dict[str, Any]] = list(ROWS)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.requests.append(params)
        keyword = params.get("keyword", "")
        await asyncio.sleep(self.delays.get(keyword, self.delay))

        if "limit" in params and int(params["limit"]) > MAX_LIMIT:
            return httpx.Response(422, json={"success": False, "error": "Invalid request parameters."})
        if self.fail:
            return httpx.Response(500, json={"success": False, "error": "Could not fetch advocates"})

        needle = keyword.lower()
        rows = [r for r in self.rows if needle in f"{r['firstName']} {r['lastName']} {r['city']}".lower()]
        sort_by = params.get("sortBy")
        if sort_by:
            rows.sort(key=lambda r: (r[sort_by], r["id"]), reverse=params.get("sortDir") == "desc")
        if "limit" in params:
            rows = rows[: int(params["limit"])]
        return httpx.Response(200, json={"success": True, "data": {"data": rows}})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class RecordingRenderer:
    def __init__(self) -> None:
        self.states: list[ControllerState] = []

    def render(self, state: ControllerState) -> None:
        self.states.append(state)


@pytest.fixture()
def server() -> FakeListingServer:
    return FakeListingServer()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


def generated_rows(count: int) -> list[dict[str, Any]]:
    return [
        {"id": i, "firstName": f"First{i}", "lastName": f"Last{i}", "city": "Boston", "degree": "MD",
         "specialties": [], "yearsOfExperience": i % 40, "phoneNumber": 5550000000 + i}
        for i in range(1, count + 1)
    ]
