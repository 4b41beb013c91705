"""
Data source protocol.

Two implementations share one interface:

- :class:`~hostboard.sources.live.LiveSource`: Ansible-backed, spawns processes
- :class:`~hostboard.sources.sample.SampleSource`: canned data, spawns nothing

``settings.data_source`` selects which one the API uses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from hostboard.core.models import ConfigDocument
from hostboard.execution.dispatcher import DispatchResult

if TYPE_CHECKING:
    from hostboard.core.settings import HostboardSettings
    from hostboard.execution.runner import ProcessRunner


@runtime_checkable
class DashboardSource(Protocol):
    """Provider of configuration, inventory and widget output."""

    name: str

    async def get_config(self) -> ConfigDocument: ...

    async def get_inventory(self) -> Any: ...

    async def run_widget(self, script_identifier: str | None, host: str | None) -> DispatchResult: ...


def create_source(
    settings: HostboardSettings,
    *,
    runner: ProcessRunner | None = None,
) -> DashboardSource:
    """Build the source named by ``settings.data_source``."""
    if settings.data_source == "sample":
        from hostboard.sources.sample import SampleSource

        return SampleSource()

    from hostboard.sources.live import LiveSource

    return LiveSource(settings, runner=runner)
