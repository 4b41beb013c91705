"""
Config router - the static dashboard configuration.

Endpoints:
    GET /config    API location, inventory path and widget mapping
"""

from __future__ import annotations

from fastapi import APIRouter

from hostboard.api.deps import Source
from hostboard.core.models import ConfigDocument

router = APIRouter()


@router.get("/config", response_model=ConfigDocument)
async def read_config(source: Source) -> ConfigDocument:
    """Return the dashboard configuration. Never fails."""
    return await source.get_config()
