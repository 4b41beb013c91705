"""Remote data source - another hostboard API, reached over HTTP."""

from __future__ import annotations

from typing import Any

from hostboard.client import DashboardClient
from hostboard.core.models import ConfigDocument
from hostboard.execution.dispatcher import DispatchResult


class RemoteSource:
    """Reads everything from a running hostboard server.

    Request failures surface as :class:`~hostboard.client.DashboardClientError`.
    """

    name = "remote"

    def __init__(self, client: DashboardClient) -> None:
        self.client = client

    async def get_config(self) -> ConfigDocument:
        return ConfigDocument.model_validate(await self.client.fetch_config())

    async def get_inventory(self) -> Any:
        return await self.client.fetch_inventory()

    async def run_widget(self, script_identifier: str | None, host: str | None) -> DispatchResult:
        data = await self.client.fetch_widget_data(script_identifier or "", host or "")
        return DispatchResult(output=data["output"])

    async def aclose(self) -> None:
        await self.client.aclose()
