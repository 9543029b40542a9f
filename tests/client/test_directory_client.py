"""Tests for the async HTTP client."""

from __future__ import annotations

import httpx
import pytest

from advocate_directory.api.app import create_app
from advocate_directory.client.directory_client import DirectoryClient
from advocate_directory.config import DirectorySettings
from advocate_directory.core.errors import ErrorCategory, FetchError
from advocate_directory.core.orm import create_tables


def _client(handler) -> DirectoryClient:
    return DirectoryClient("http://testserver", transport=httpx.MockTransport(handler))


def _ok(rows):
    return httpx.Response(200, json={"success": True, "data": {"data": rows}})


class TestListAdvocates:
    @pytest.mark.asyncio
    async def test_params_sent_and_rows_unwrapped(self):
        seen = []

        def handler(request):
            seen.append(request)
            return _ok([{"id": 1}])

        async with _client(handler) as client:
            rows = await client.list_advocates("anx", "lastName", "desc", limit=10, offset=5)

        assert rows == [{"id": 1}]
        assert seen[0].url.path == "/advocates"
        assert dict(seen[0].url.params) == {
            "keyword": "anx",
            "sortBy": "lastName",
            "sortDir": "desc",
            "limit": "10",
            "offset": "5",
        }

    @pytest.mark.asyncio
    async def test_empty_params_omitted(self):
        seen = []

        def handler(request):
            seen.append(request)
            return _ok([])

        async with _client(handler) as client:
            await client.list_advocates("", None, None)

        assert seen[0].url.query == b""

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        async with _client(lambda request: httpx.Response(503, text="busy")) as client:
            with pytest.raises(FetchError) as exc_info:
                await client.list_advocates()

        assert exc_info.value.status_code == 503
        assert exc_info.value.message == "HTTP error! status: 503"
        assert exc_info.value.category is ErrorCategory.NETWORK

    @pytest.mark.asyncio
    async def test_unsuccessful_envelope(self):
        body = {"success": False, "error": "Could not fetch advocates"}
        async with _client(lambda request: httpx.Response(200, json=body)) as client:
            with pytest.raises(FetchError, match="Could not fetch advocates"):
                await client.list_advocates()

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(FetchError):
                await client.list_advocates()

    @pytest.mark.asyncio
    async def test_malformed_listing(self):
        async with _client(lambda request: httpx.Response(200, json={"success": True})) as client:
            with pytest.raises(FetchError, match="Malformed"):
                await client.list_advocates()

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(FetchError) as exc_info:
                await client.list_advocates()

        assert isinstance(exc_info.value.cause, httpx.ConnectError)


class TestAgainstApp:
    @pytest.mark.asyncio
    async def test_seed_and_search(self, tmp_path):
        app = create_app(settings=DirectorySettings(database_url=f"sqlite:///{tmp_path / 'client.db'}"))
        create_tables(app.state.engine)
        transport = httpx.ASGITransport(app=app)

        try:
            async with DirectoryClient("http://testserver", transport=transport) as client:
                seeded = await client.seed()
                everything = await client.list_advocates()
                phds = await client.list_advocates("phd", "lastName", "desc")
        finally:
            app.state.engine.dispose()

        assert seeded["count"] == len(everything)
        assert phds
        assert all(r["degree"] == "PhD" for r in phds)
        names = [r["lastName"] for r in phds]
        assert names == sorted(names, reverse=True)
