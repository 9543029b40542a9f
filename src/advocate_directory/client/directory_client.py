"""
Async HTTP client for the listing and seed endpoints.

Every failure mode (transport error, non-2xx status, undecodable body,
``success: false`` envelope) surfaces as a single
:class:`~advocate_directory.core.errors.FetchError`.
"""

from __future__ import annotations

from typing import Any

import httpx

from advocate_directory.core.errors import FetchError

DEFAULT_BASE_URL = "http://localhost:8000"


class DirectoryClient:
    """Thin ``httpx.AsyncClient`` wrapper for ``GET /advocates`` and ``POST /seed``.

    Args:
        base_url: Server root, e.g. ``http://localhost:8000``.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> DirectoryClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_advocates(
        self,
        keyword: str = "",
        sort_by: str | None = None,
        sort_dir: str | None = None,
        *,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """Fetch one listing.  Empty/``None`` parameters are omitted from the URL."""
        params: dict[str, Any] = {}
        if keyword:
            params["keyword"] = keyword
        if sort_by:
            params["sortBy"] = sort_by
        if sort_dir:
            params["sortDir"] = sort_dir
        if limit is not None:
            params["limit"] = limit
        if offset:
            params["offset"] = offset

        body = await self._request("GET", "/advocates", params=params)
        try:
            return list(body["data"]["data"])
        except (KeyError, TypeError) as exc:
            raise FetchError("Malformed listing response", cause=exc) from exc

    async def seed(self) -> dict[str, Any]:
        """Trigger ``POST /seed`` and return the success envelope."""
        return await self._request("POST", "/seed")

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise FetchError(cause=exc, context={"url": url}) from exc

        if response.is_error:
            raise FetchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                context={"url": url},
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise FetchError("Response was not JSON", status_code=response.status_code, cause=exc) from exc

        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            raise FetchError(error or "Request was not successful", status_code=response.status_code)
        return body
