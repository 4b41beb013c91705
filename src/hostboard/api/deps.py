"""
FastAPI dependency injection - settings singleton and the data source.

Usage in routers::

    from hostboard.api.deps import Source

    @router.get("/things")
    async def list_things(source: Source):
        ...

Tags:
    hostboard, api, dependency-injection
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from hostboard.core.settings import HostboardSettings
from hostboard.sources.protocol import DashboardSource

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> HostboardSettings:
    """Cached settings - loaded once per process."""
    return HostboardSettings()


# ── Data source (built once by create_app) ───────────────────────────────


def get_source(request: Request) -> DashboardSource:
    """The :class:`DashboardSource` the app was created with."""
    return request.app.state.source


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[HostboardSettings, Depends(get_settings)]
Source = Annotated[DashboardSource, Depends(get_source)]
