"""
HTTP client for the hostboard API.

Mirrors what the browser dashboard does: fetch the configuration and
inventory (independently, optionally concurrently) then run widgets for
a selected host.  Used by the CLI and by scripts that want dashboard
data without a browser.

The base URL comes from ``HOSTBOARD_API_BASE_URL`` and falls back to
the reference control node.

Example:
    >>> async with DashboardClient() as client:
    ...     config, inventory = await client.fetch_dashboard()
    ...     data = await client.fetch_widget_data("cpu_usage.yml", "192.168.1.204")
    >>> data["output"]
    'PLAY [all] ...'
"""

from __future__ import annotations

import asyncio
import os
from typing import Any
from urllib.parse import quote

import httpx

from hostboard.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://192.168.1.197:9998"
BASE_URL_ENV = "HOSTBOARD_API_BASE_URL"
DEFAULT_TIMEOUT = 5.0


class DashboardClientError(Exception):
    """A request to the hostboard API failed.

    Attributes:
        status_code: HTTP status when the server answered, else ``None``
        body: Decoded JSON error body when the server sent one
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def resolve_base_url(base_url: str | None = None) -> str:
    return (base_url or os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/")


def describe_error(exc: Exception) -> DashboardClientError:
    """Turn an httpx exception into a :class:`DashboardClientError` with a readable message."""
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        try:
            body = response.json()
        except ValueError:
            body = None
        reason = "Unknown error"
        if isinstance(body, dict):
            reason = body.get("error") or body.get("message") or reason
            if body.get("details"):
                reason = f"{reason}: {body['details']}"
        return DashboardClientError(
            f"API error: {response.status_code} - {reason}",
            status_code=response.status_code,
            body=body,
        )
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)):
        return DashboardClientError(
            "No response received from server. Please check your network connection and server status."
        )
    return DashboardClientError(
        "Error setting up the request. Please check your network connection and try again."
    )


class DashboardClient:
    """Async client for ``/config``, ``/inventory`` and ``/widget``."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = resolve_base_url(base_url)
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> DashboardClient:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, **params: Any) -> Any:
        logger.debug("api_request", url=f"{self.base_url}{path}", params=params or None)
        try:
            response = await self._client.get(path, params=params or None)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = describe_error(exc)
            logger.error("api_request_failed", path=path, error=error.message)
            raise error from exc
        return response.json()

    async def fetch_config(self) -> dict[str, Any]:
        return await self._get("/config")

    async def fetch_inventory(self) -> Any:
        return await self._get("/inventory")

    async def fetch_dashboard(self) -> tuple[dict[str, Any], Any]:
        """Fetch config and inventory concurrently."""
        config, inventory = await asyncio.gather(self.fetch_config(), self.fetch_inventory())
        return config, inventory

    async def fetch_widget_data(self, script_path: str, host: str) -> dict[str, Any]:
        return await self._get(f"/widget/{quote(script_path, safe='')}", host=host)


__all__ = [
    "DashboardClient",
    "DashboardClientError",
    "describe_error",
    "resolve_base_url",
    "DEFAULT_BASE_URL",
    "BASE_URL_ENV",
]
