"""
Hostboard logging - structured logging for the API, dispatcher and CLI.

Every module obtains its logger through :func:`get_logger` and emits
key/value events.  :func:`configure_logging` is called once at startup
(by the API app factory or the CLI callback).

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="hostboard")
            │
            ▼
        structlog processor chain:
          1. merge_contextvars     (request_id, widget, host ...)
          2. add_log_level, TimeStamper(fmt="iso")
          3. service.name, service.version
          4. JSON: format_exc_info, ECS field names, JSONRenderer
             console: ConsoleRenderer

Examples:
    >>> from hostboard.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", service="hostboard")
    >>> log = get_logger(__name__)
    >>> log.info("playbook_started", script="cpu_usage.yml", host="192.168.1.204")

    Scoped context:

    >>> with LogContext(request_id="abc123"):
    ...     log.info("dispatching")

Tags:
    logging, structlog, observability, hostboard

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor, WrappedLogger
from structlog._config import BoundLoggerLazyProxy

from hostboard import __version__

# structlog key -> field name in JSON output
_JSON_FIELD_NAMES = {
    "timestamp": "@timestamp",
    "level": "log.level",
    "logger": "log.logger",
}


def _stamp_service(service: str) -> Processor:
    """Build a processor that tags every event with the service name and version."""

    def stamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service.name", service)
        event_dict.setdefault("service.version", __version__)
        return event_dict

    return stamp


def _rename_json_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    for key, field in _JSON_FIELD_NAMES.items():
        if key in event_dict:
            event_dict[field] = event_dict.pop(key)
    return event_dict


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "hostboard",
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for the process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name attached to every event
        stream: Where log lines go (default stdout; the CLI uses stderr)

    Raises:
        ValueError: ``level`` is not a standard logging level name.
    """
    stream = stream or sys.stdout
    threshold = _level_number(level)

    if json_format is None:
        json_format = not stream.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.set_exc_info,
        _stamp_service(service),
    ]

    if json_format:
        # playbook failures carry tracebacks; keep them on one JSON line
        processors += [
            structlog.processors.format_exc_info,
            _rename_json_fields,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # uvicorn logs through the stdlib
    logging.basicConfig(format="%(message)s", stream=stream, level=threshold)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``).

    The name travels as the ``logger`` key of every event.
    """
    if name is None:
        return structlog.get_logger()
    # structlog.get_logger(logger=...) collides with wrap_logger's own
    # ``logger`` parameter, so build the same lazy proxy directly.
    return BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=())


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(request_id="abc123"):
            logger.info("widget_requested")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())

    async def __aenter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    async def __aexit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "LogContext",
]
