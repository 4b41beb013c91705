"""
Error types for hostboard.

The error set is flat: every failure the dashboard can
report is one of four kinds, each a direct subclass of
:class:`HostboardError`.  Each kind knows its machine-readable ``code``,
the human-readable ``message`` sent back as the ``error`` field, and an
optional ``details`` string carrying the underlying cause.

Architecture:
    ::

        HostboardError (code, message, details, cause)
          ├── MissingParameterError   MISSING_PARAMETER   -> 400
          ├── UnknownOperationError   UNKNOWN_OPERATION   -> 404
          ├── ExecutionFailedError    EXECUTION_FAILED    -> 500
          └── ParseFailedError        PARSE_FAILED        -> 500

    The HTTP mapping lives in ``hostboard.api.middleware.errors``; this
    module has no web dependency so the CLI and client can reuse it.

Examples:
    >>> err = ExecutionFailedError("Failed to execute playbook", details="exit status 2")
    >>> err.code
    'EXECUTION_FAILED'
    >>> err.to_dict()
    {'error': 'Failed to execute playbook', 'details': 'exit status 2'}

    Chaining the original exception:

    >>> try:
    ...     raise FileNotFoundError("ansible-playbook")
    ... except FileNotFoundError as e:
    ...     err = ExecutionFailedError("Failed to execute playbook", details=str(e), cause=e)
    >>> err.cause
    FileNotFoundError('ansible-playbook')

Tags:
    error-handling, hostboard

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Any


class HostboardError(Exception):
    """Base exception for every error hostboard reports to a caller.

    Attributes:
        code: Machine-readable error code (class default)
        message: Short human-readable summary, surfaced as ``error``
        details: Underlying cause text, surfaced as ``details`` when set
        cause: Original exception, also chained as ``__cause__``
    """

    code: str = "INTERNAL"
    default_message: str = "Internal Server Error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: str | None = None,
        cause: Exception | None = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Response body shape: ``{"error": ..., "details": ...}``."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


class MissingParameterError(HostboardError):
    """A required request field (script identifier or host) is absent."""

    code = "MISSING_PARAMETER"
    default_message = "Missing scriptPath or host"


class UnknownOperationError(HostboardError):
    """The script identifier does not name a configured widget."""

    code = "UNKNOWN_OPERATION"
    default_message = "Unknown scriptPath"


class ExecutionFailedError(HostboardError):
    """An external process exited non-zero, timed out, or could not be spawned."""

    code = "EXECUTION_FAILED"
    default_message = "Failed to execute playbook"


class ParseFailedError(HostboardError):
    """An external process succeeded but its output was not valid JSON."""

    code = "PARSE_FAILED"
    default_message = "Failed to parse inventory data"


__all__ = [
    "HostboardError",
    "MissingParameterError",
    "UnknownOperationError",
    "ExecutionFailedError",
    "ParseFailedError",
]
