"""Core primitives shared by every hostboard layer."""

from hostboard.core.errors import (
    ExecutionFailedError,
    HostboardError,
    MissingParameterError,
    ParseFailedError,
    UnknownOperationError,
)
from hostboard.core.logging import configure_logging, get_logger
from hostboard.core.settings import HostboardSettings, WidgetSettings

__all__ = [
    "HostboardError",
    "MissingParameterError",
    "UnknownOperationError",
    "ExecutionFailedError",
    "ParseFailedError",
    "configure_logging",
    "get_logger",
    "HostboardSettings",
    "WidgetSettings",
]
