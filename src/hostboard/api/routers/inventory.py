"""
Inventory router - the host inventory, passed through as-is.

Endpoints:
    GET /inventory    Parsed inventory provider output

Failures (both 500): the provider failed to run (``Failed to fetch
inventory``) or printed something that is not JSON (``Failed to parse
inventory data``).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from hostboard.api.deps import Source
from hostboard.core.models import ErrorBody

router = APIRouter()


@router.get("/inventory", responses={500: {"model": ErrorBody}})
async def read_inventory(source: Source) -> Any:
    return await source.get_inventory()
