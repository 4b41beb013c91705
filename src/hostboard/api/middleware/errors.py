"""
Error handling - maps :class:`HostboardError` kinds to JSON responses.

Every failure body has the shape ``{"error": str, "details": str}``;
``details`` is omitted when there is nothing more to say (missing
parameters).
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from hostboard.core.errors import HostboardError
from hostboard.core.logging import get_logger
from hostboard.core.models import ErrorBody

logger = get_logger(__name__)

# ── Error code → HTTP status mapping ─────────────────────────────────────

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "MISSING_PARAMETER": 400,
    "UNKNOWN_OPERATION": 404,
    "NOT_FOUND": 404,
    "EXECUTION_FAILED": 500,
    "PARSE_FAILED": 500,
    "INTERNAL": 500,
}


def status_for_error_code(code: str) -> int:
    """Resolve an error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def error_response(*, status: int, error: str, details: str | None = None) -> JSONResponse:
    """Build an ``{error, details}`` JSON response."""
    body = ErrorBody(error=error, details=details)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


async def hostboard_error_handler(request: Request, exc: HostboardError) -> JSONResponse:
    status = status_for_error_code(exc.code)
    logger.error(
        "request_failed",
        code=exc.code,
        status=status,
        error=exc.message,
        details=exc.details,
        path=request.url.path,
    )
    return error_response(status=status, error=exc.message, details=exc.details)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions - returns 500 without crashing the server."""
    logger.exception("unhandled_exception", path=request.url.path)
    return error_response(
        status=500,
        error="Internal Server Error",
        details=str(exc) if request.app.state.settings.debug else "An unexpected error occurred.",
    )
