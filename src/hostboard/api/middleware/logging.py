"""Request logging middleware - one log line per request.

Assigns (or propagates) an ``X-Request-ID``, binds it into the
structlog context for everything logged while the request runs, and
reports processing time in ``X-Process-Time-Ms``.

Exceptions no handler claimed are turned into the 500 body here, so
those responses carry the same headers and completion line as any other.

Tags:
    hostboard, api, middleware, logging, request-id, timing
"""

from __future__ import annotations

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hostboard.api.middleware.errors import unhandled_exception_handler
from hostboard.core.logging import LogContext, get_logger

logger = get_logger("hostboard.api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, URL, status and elapsed time for every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        async with LogContext(request_id=request_id):
            logger.info("request_received", method=request.method, url=str(request.url))
            start = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                response = await unhandled_exception_handler(request, exc)
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                elapsed_ms=elapsed_ms,
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time-Ms"] = str(elapsed_ms)
        return response
