"""HTTP middleware and exception handlers."""

from hostboard.api.middleware.errors import (
    ERROR_CODE_TO_STATUS,
    error_response,
    hostboard_error_handler,
    status_for_error_code,
    unhandled_exception_handler,
)
from hostboard.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "ERROR_CODE_TO_STATUS",
    "error_response",
    "hostboard_error_handler",
    "status_for_error_code",
    "unhandled_exception_handler",
    "RequestLoggingMiddleware",
]
