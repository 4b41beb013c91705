"""Live data source - real configuration, real Ansible processes."""

from __future__ import annotations

from typing import Any

from hostboard.core.models import ConfigDocument
from hostboard.core.settings import HostboardSettings
from hostboard.execution.dispatcher import DispatchResult, OperationDispatcher
from hostboard.execution.runner import ProcessRunner
from hostboard.ops.config import get_config


class LiveSource:
    """Delegates to the config provider and the operation dispatcher."""

    name = "live"

    def __init__(self, settings: HostboardSettings, *, runner: ProcessRunner | None = None) -> None:
        self._settings = settings
        self.dispatcher = OperationDispatcher(settings, runner=runner)

    async def get_config(self) -> ConfigDocument:
        return get_config(self._settings)

    async def get_inventory(self) -> Any:
        return await self.dispatcher.get_inventory()

    async def run_widget(self, script_identifier: str | None, host: str | None) -> DispatchResult:
        return await self.dispatcher.dispatch(script_identifier, host)
