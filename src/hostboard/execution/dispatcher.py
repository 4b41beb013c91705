"""
Operation dispatcher - runs a configured playbook against one host.

``OperationDispatcher`` is the only component with real contract
surface: it validates the ``(script identifier, host)`` pair, resolves
the identifier against the configured widget set, builds the runner
argv, awaits the child process and shapes the outcome.  Its sibling
operation :meth:`OperationDispatcher.get_inventory` runs the inventory
provider and parses its JSON.

Architecture:
    ::

        dispatch(script_identifier, host)
          │
          ├─ missing either?         → MissingParameterError   (no process)
          ├─ not a configured widget → UnknownOperationError   (no process)
          │
          ▼
        [runner_command, script_path, "-i", inventory_path, "--limit", host]
          │  ProcessRunner.run()
          ├─ RunnerError             → ExecutionFailedError
          ├─ exit != 0               → ExecutionFailedError
          └─ exit == 0               → DispatchResult(output=stdout)

        get_inventory()
          │  ProcessRunner.run(inventory_command)
          ├─ RunnerError / exit != 0 → ExecutionFailedError
          ├─ stdout not JSON         → ParseFailedError
          └─ parsed JSON

    Identifier resolution order: exact configured ``script_path``, then
    widget name, then file name of a configured ``script_path``.  The
    runner only ever receives a configured path, never the raw request
    text.

Example:
    >>> dispatcher = OperationDispatcher(HostboardSettings())
    >>> result = await dispatcher.dispatch("cpu_usage.yml", "192.168.1.204")
    >>> result.to_dict()
    {'output': 'PLAY [all] ...'}

Tags:
    hostboard, execution, dispatcher, ansible

Doc-Types:
    api-reference
"""

from __future__ import annotations

import json
import posixpath
from dataclasses import dataclass
from typing import Any

from hostboard.core.errors import (
    ExecutionFailedError,
    MissingParameterError,
    ParseFailedError,
    UnknownOperationError,
)
from hostboard.core.logging import get_logger
from hostboard.core.settings import HostboardSettings
from hostboard.execution.runner import ProcessResult, ProcessRunner, RunnerError, SubprocessRunner

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Successful widget run: the runner's stdout, unparsed."""

    output: str

    def to_dict(self) -> dict[str, str]:
        return {"output": self.output}


class OperationDispatcher:
    """Maps a widget request onto one external runner invocation."""

    def __init__(
        self,
        settings: HostboardSettings,
        runner: ProcessRunner | None = None,
    ) -> None:
        self._settings = settings
        self._runner = runner or SubprocessRunner(
            timeout_seconds=settings.command_timeout,
            max_concurrent=settings.max_concurrent_processes,
        )

    @property
    def runner(self) -> ProcessRunner:
        return self._runner

    # ------------------------------------------------------------------ #
    # Widget dispatch
    # ------------------------------------------------------------------ #

    def resolve(self, script_identifier: str) -> str:
        """Return the configured script path named by *script_identifier*.

        Raises:
            UnknownOperationError: no configured widget matches.
        """
        widgets = self._settings.widgets
        configured = [w.script_path for w in widgets.values()]

        if script_identifier in configured:
            return script_identifier
        if script_identifier in widgets:
            return widgets[script_identifier].script_path
        for script_path in configured:
            if posixpath.basename(script_path) == script_identifier:
                return script_path

        raise UnknownOperationError(details=f"'{script_identifier}' is not a configured widget script")

    def build_command(self, script_path: str, host: str) -> list[str]:
        return [
            self._settings.runner_command,
            script_path,
            "-i",
            self._settings.inventory_path,
            "--limit",
            host,
        ]

    async def dispatch(self, script_identifier: str | None, host: str | None) -> DispatchResult:
        """Run the widget's playbook limited to *host* and return its stdout."""
        if not script_identifier or not host:
            logger.error("missing_parameter", script=script_identifier, host=host)
            raise MissingParameterError()

        script_path = self.resolve(script_identifier)
        argv = self.build_command(script_path, host)
        logger.info("executing_command", command=" ".join(argv))

        result = await self._run(argv, failure_message="Failed to execute playbook")
        if not result.ok:
            logger.error("playbook_failed", returncode=result.returncode, stderr=result.stderr)
            raise ExecutionFailedError("Failed to execute playbook", details=result.failure_message())

        if result.stderr:
            logger.warning("playbook_stderr", stderr=result.stderr)
        logger.debug("widget_stdout", stdout=result.stdout, elapsed_ms=result.elapsed_ms)
        return DispatchResult(output=result.stdout)

    # ------------------------------------------------------------------ #
    # Inventory
    # ------------------------------------------------------------------ #

    async def get_inventory(self) -> Any:
        """Run the inventory provider and return its parsed JSON."""
        argv = list(self._settings.inventory_command)
        result = await self._run(argv, failure_message="Failed to fetch inventory")
        if not result.ok:
            logger.error("inventory_failed", returncode=result.returncode, stderr=result.stderr)
            raise ExecutionFailedError("Failed to fetch inventory", details=result.failure_message())

        if result.stderr:
            logger.warning("inventory_stderr", stderr=result.stderr)
        logger.debug("inventory_stdout", stdout=result.stdout)

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            logger.error("inventory_parse_failed", error=str(exc))
            raise ParseFailedError(details=str(exc), cause=exc) from exc

    async def _run(self, argv: list[str], *, failure_message: str) -> ProcessResult:
        try:
            return await self._runner.run(argv)
        except RunnerError as exc:
            logger.error("exec_error", command=" ".join(argv), error=str(exc))
            raise ExecutionFailedError(failure_message, details=str(exc), cause=exc) from exc


__all__ = ["DispatchResult", "OperationDispatcher"]
