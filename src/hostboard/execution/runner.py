"""Process runner - spawns one external program and captures its output.

The dispatcher never touches ``asyncio.subprocess`` directly; it hands an
argv list to a :class:`ProcessRunner`.  :class:`SubprocessRunner` is the
real implementation, tests substitute their own object with a matching
``run`` coroutine.

Architecture:

    .. code-block:: text

        OperationDispatcher
              │ argv
              ▼
        ProcessRunner.run(argv) ──► asyncio.create_subprocess_exec
              │                         │ stdout / stderr / returncode
              ▼                         ▼
        ProcessResult  ◄───────── communicate()

        Limits (both optional, both off by default):
          timeout_seconds           kill the child and raise ProcessTimeoutError
          max_concurrent            asyncio.Semaphore around each child

Example:
    >>> runner = SubprocessRunner(timeout_seconds=30)
    >>> result = await runner.run(["ansible-inventory", "--list"])
    >>> result.ok
    True

Tags:
    hostboard, execution, subprocess, asyncio

Doc-Types:
    api-reference
"""

from __future__ import annotations

import asyncio
import shlex
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from hostboard.core.logging import get_logger

logger = get_logger(__name__)


class RunnerError(Exception):
    """The external process did not produce a result."""


class ProcessLaunchError(RunnerError):
    """The command could not be started (missing executable, unusable argv, ...)."""


class ProcessTimeoutError(RunnerError):
    """The process outlived its timeout and was killed."""


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Captured outcome of one finished external process.

    Attributes:
        argv: The command that was run
        returncode: Exit status (0 = success)
        stdout: Standard output, decoded as UTF-8
        stderr: Standard error, decoded as UTF-8
        elapsed_ms: Wall-clock duration of the process
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv)

    def failure_message(self) -> str:
        """Human-readable failure text: the command followed by its stderr."""
        message = f"Command failed: {self.command_line}"
        if self.stderr:
            message = f"{message}\n{self.stderr}"
        return message


@runtime_checkable
class ProcessRunner(Protocol):
    """Anything that can run an argv list and return a :class:`ProcessResult`.

    Implementations raise :class:`RunnerError` subclasses when no result
    exists; a non-zero exit is a *result*, not an exception.
    """

    async def run(self, argv: Sequence[str]) -> ProcessResult: ...


class SubprocessRunner:
    """Runs commands as local subprocesses with ``asyncio``.

    The calling coroutine suspends until the child exits; the event loop
    keeps serving other requests meanwhile.  Each call spawns its own
    child, identical concurrent calls are not merged.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float | None = None,
        max_concurrent: int | None = None,
        kill_timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize the runner.

        Args:
            timeout_seconds: Kill the child after this many seconds.
                ``None`` waits forever.
            max_concurrent: Maximum children alive at once across all
                calls on this runner.  ``None`` means unbounded.
            kill_timeout_seconds: Seconds to wait after SIGTERM before
                sending SIGKILL on timeout.
        """
        self._timeout = timeout_seconds
        self._kill_timeout = kill_timeout_seconds
        self._semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent else None

    async def run(self, argv: Sequence[str]) -> ProcessResult:
        if self._semaphore is None:
            return await self._run(tuple(argv))
        async with self._semaphore:
            return await self._run(tuple(argv))

    async def _run(self, argv: tuple[str, ...]) -> ProcessResult:
        start = time.perf_counter()
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as exc:
            # ValueError: argv element the OS cannot take (embedded NUL)
            logger.error("process_launch_failed", command=shlex.join(argv), error=str(exc))
            raise ProcessLaunchError(f"Command failed to start: {shlex.join(argv)}: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except TimeoutError as exc:
            await self._terminate(process)
            logger.error("process_timed_out", command=shlex.join(argv), timeout=self._timeout)
            raise ProcessTimeoutError(
                f"Command timed out after {self._timeout}s: {shlex.join(argv)}"
            ) from exc

        return ProcessResult(
            argv=argv,
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
        )

    async def _terminate(self, process: asyncio.subprocess.Process) -> None:
        try:
            process.terminate()
            try:
                await asyncio.wait_for(process.wait(), timeout=self._kill_timeout)
            except TimeoutError:
                process.kill()
                await process.wait()
        except ProcessLookupError:
            pass  # already gone


__all__ = [
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "RunnerError",
    "ProcessLaunchError",
    "ProcessTimeoutError",
]
