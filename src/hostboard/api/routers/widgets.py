"""
Widgets router - run one widget's playbook against one host.

Endpoints:
    GET /widget/{scriptPath}?host=H    Raw runner stdout as ``{"output": ...}``

``scriptPath`` may be a configured playbook path (URL-encoded), a
widget name, or a playbook file name::

    GET /widget/cpu_usage.yml?host=192.168.1.204
    GET /widget/%2Fetc%2Fansible%2Fplaybooks%2Fcpu_usage.yml?host=192.168.1.204
    GET /widget/cpu?host=192.168.1.204

Failures:
    400 ``Missing scriptPath or host``
    404 ``Unknown scriptPath``
    500 ``Failed to execute playbook`` with the runner's message in ``details``
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from hostboard.api.deps import Source
from hostboard.core.errors import MissingParameterError
from hostboard.core.logging import get_logger
from hostboard.core.models import ErrorBody, WidgetOutput

logger = get_logger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorBody},
    404: {"model": ErrorBody},
    500: {"model": ErrorBody},
}


@router.get("/widget", response_model=WidgetOutput, responses=_ERROR_RESPONSES, include_in_schema=False)
async def run_widget_without_script() -> WidgetOutput:
    raise MissingParameterError()


@router.get("/widget/{script_path:path}", response_model=WidgetOutput, responses=_ERROR_RESPONSES)
async def run_widget(
    script_path: str,
    source: Source,
    host: str | None = Query(default=None, description="Inventory host to limit the run to"),
) -> WidgetOutput:
    logger.info("widget_requested", script=script_path, host=host)
    result = await source.run_widget(script_path, host)
    return WidgetOutput(output=result.output)
