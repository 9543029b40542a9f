"""
Integration tests for the listing, seed and health endpoints using FastAPI TestClient.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from advocate_directory.api.deps import get_operation_context
from advocate_directory.core.query import MAX_LIMIT
from advocate_directory.core.seed_data import SEED_ADVOCATES
from advocate_directory.ops.context import OperationContext
from tests.conftest import SAMPLE_ADVOCATES, matches_keyword

ADVOCATE_KEYS = {
    "id",
    "firstName",
    "lastName",
    "city",
    "degree",
    "specialties",
    "yearsOfExperience",
    "phoneNumber",
    "createdAt",
}


def _rows(resp) -> list[dict]:
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert "error" not in body
    return body["data"]["data"]


class TestListingEndpoint:
    def test_envelope_and_shape(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates"))
        assert len(rows) == len(SAMPLE_ADVOCATES)
        assert set(rows[0]) == ADVOCATE_KEYS
        assert rows[0]["firstName"] == "Ava"
        assert rows[0]["specialties"] == ["Sleep issues"]

    def test_empty_table(self, client):
        assert _rows(client.get("/advocates")) == []

    def test_empty_keyword_returns_all(self, seeded_client):
        assert len(_rows(seeded_client.get("/advocates", params={"keyword": ""}))) == len(SAMPLE_ADVOCATES)

    @pytest.mark.parametrize("keyword", ["dant", "ANX", "boston", "15"])
    def test_keyword(self, seeded_client, keyword):
        rows = _rows(seeded_client.get("/advocates", params={"keyword": keyword}))
        assert rows
        assert all(matches_keyword(r, keyword) for r in rows)

    def test_dant_excludes_md(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates", params={"keyword": "dant"}))
        assert [r["degree"] for r in rows] == ["Certified Attendant"]

    def test_sort_desc(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates", params={"sortBy": "lastName", "sortDir": "desc"}))
        names = [r["lastName"] for r in rows]
        assert names == sorted(names, reverse=True)

    def test_uppercase_desc_is_descending_over_http(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates", params={"sortBy": "lastName", "sortDir": "DESC"}))
        names = [r["lastName"] for r in rows]
        assert names == sorted(names, reverse=True)

    def test_unknown_sort_key_falls_back_to_id(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates", params={"sortBy": "password", "sortDir": "desc"}))
        ids = [r["id"] for r in rows]
        assert ids == sorted(ids, reverse=True)

    def test_garbage_direction_is_ascending(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates", params={"sortBy": "yearsOfExperience", "sortDir": "sideways"}))
        years = [r["yearsOfExperience"] for r in rows]
        assert years == sorted(years)

    def test_limit_and_offset(self, seeded_client):
        everything = _rows(seeded_client.get("/advocates"))
        window = _rows(seeded_client.get("/advocates", params={"limit": 2, "offset": 1}))
        assert [r["id"] for r in window] == [r["id"] for r in everything[1:3]]

    @pytest.mark.parametrize(
        "params",
        [{"limit": 0}, {"limit": MAX_LIMIT + 1}, {"offset": -1}, {"limit": "ten"}],
    )
    def test_invalid_window_uses_failure_envelope(self, client, params):
        resp = client.get("/advocates", params=params)
        assert resp.status_code == 422
        assert resp.json() == {"success": False, "error": "Invalid request parameters."}

    def test_max_limit_accepted(self, seeded_client):
        rows = _rows(seeded_client.get("/advocates", params={"limit": MAX_LIMIT}))
        assert len(rows) == len(SAMPLE_ADVOCATES)

    def test_storage_error_is_generic(self, app, client):
        session = MagicMock()
        session.scalars.side_effect = OperationalError(
            "SELECT advocates.first_name FROM advocates", {}, Exception("database is locked")
        )
        app.dependency_overrides[get_operation_context] = lambda: OperationContext(session=session)

        resp = client.get("/advocates", params={"keyword": "anx"})

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Could not fetch advocates"}
        assert "SELECT" not in resp.text
        assert "locked" not in resp.text

    def test_unexpected_error_is_generic(self, app):
        def explode():
            raise RuntimeError("connection string with password=hunter2")

        app.dependency_overrides[get_operation_context] = explode
        with TestClient(app, raise_server_exceptions=False) as c:
            resp = c.get("/advocates")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "An unexpected error occurred."}
        assert "hunter2" not in resp.text


class TestSeedEndpoint:
    def test_seed(self, client):
        resp = client.post("/seed")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Seeded advocates successfully"
        assert body["count"] == len(SEED_ADVOCATES)
        assert len(body["records"]) == len(SEED_ADVOCATES)

    def test_seed_then_list(self, client):
        seeded = client.post("/seed").json()["records"]
        listed = _rows(client.get("/advocates"))
        assert len(listed) == len(seeded)
        assert {r["id"] for r in listed} == {r["id"] for r in seeded}

    def test_reseed_is_idempotent_in_count(self, seeded_client):
        seeded_client.post("/seed")
        assert len(_rows(seeded_client.get("/advocates"))) == len(SEED_ADVOCATES)

    def test_seed_failure(self, app, client):
        session = MagicMock()
        session.execute.side_effect = OperationalError("DELETE FROM advocates", {}, Exception("readonly"))
        app.dependency_overrides[get_operation_context] = lambda: OperationContext(session=session)

        resp = client.post("/seed")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Could not seed advocates"}
        session.rollback.assert_called_once()


class TestHealthEndpoints:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}

    def test_ready(self, client):
        resp = client.get("/health/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ready", "database": "connected"}
