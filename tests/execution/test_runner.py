"""Tests for SubprocessRunner against real child processes.

Children are ``sys.executable -c ...`` so the suite needs nothing but
the interpreter running it.
"""

from __future__ import annotations

import asyncio
import sys
import time

import pytest

from hostboard.execution.runner import (
    ProcessLaunchError,
    ProcessResult,
    ProcessRunner,
    ProcessTimeoutError,
    SubprocessRunner,
)

pytestmark = pytest.mark.integration


def _py(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestSubprocessRunner:
    def test_satisfies_protocol(self):
        assert isinstance(SubprocessRunner(), ProcessRunner)

    @pytest.mark.asyncio
    async def test_captures_stdout_exactly(self):
        result = await SubprocessRunner().run(_py("import sys; sys.stdout.write('a\\n  b\\t\\n')"))
        assert result.ok
        assert result.returncode == 0
        assert result.stdout == "a\n  b\t\n"

    @pytest.mark.asyncio
    async def test_captures_stderr_separately(self):
        result = await SubprocessRunner().run(
            _py("import sys; print('out'); print('warn', file=sys.stderr)")
        )
        assert result.ok
        assert result.stdout.strip() == "out"
        assert result.stderr.strip() == "warn"

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_a_result(self):
        result = await SubprocessRunner().run(_py("import sys; sys.exit(3)"))
        assert not result.ok
        assert result.returncode == 3

    @pytest.mark.asyncio
    async def test_missing_executable(self):
        with pytest.raises(ProcessLaunchError, match="failed to start"):
            await SubprocessRunner().run(["hostboard-no-such-binary-xyz"])

    @pytest.mark.asyncio
    async def test_timeout_kills_child(self):
        runner = SubprocessRunner(timeout_seconds=0.2, kill_timeout_seconds=1.0)
        start = time.perf_counter()
        with pytest.raises(ProcessTimeoutError, match="timed out"):
            await runner.run(_py("import time; time.sleep(30)"))
        assert time.perf_counter() - start < 10

    @pytest.mark.asyncio
    async def test_argv_is_not_shell_interpreted(self):
        result = await SubprocessRunner().run(_py("import sys; print(sys.argv[1])") + ["$(echo hi); ls"])
        assert result.stdout.strip() == "$(echo hi); ls"

    @pytest.mark.asyncio
    async def test_concurrency_limit(self):
        runner = SubprocessRunner(max_concurrent=1)
        code = "import time; time.sleep(0.3)"
        start = time.perf_counter()
        await asyncio.gather(runner.run(_py(code)), runner.run(_py(code)))
        assert time.perf_counter() - start >= 0.6


class TestProcessResult:
    def test_failure_message_with_stderr(self):
        result = ProcessResult(
            argv=("ansible-playbook", "/p/cpu.yml", "--limit", "h 1"),
            returncode=2,
            stdout="",
            stderr="fatal: UNREACHABLE",
        )
        assert result.failure_message() == (
            "Command failed: ansible-playbook /p/cpu.yml --limit 'h 1'\nfatal: UNREACHABLE"
        )

    def test_failure_message_without_stderr(self):
        result = ProcessResult(argv=("ansible-inventory", "--list"), returncode=1, stdout="", stderr="")
        assert result.failure_message() == "Command failed: ansible-inventory --list"


class TestLaunchEdgeCases:
    @pytest.mark.asyncio
    async def test_nul_byte_in_argument_is_launch_error(self):
        with pytest.raises(ProcessLaunchError, match="null byte"):
            await SubprocessRunner().run(_py("pass") + ["a\x00b"])

    @pytest.mark.asyncio
    async def test_child_stdin_is_closed(self):
        result = await SubprocessRunner(timeout_seconds=10).run(
            _py("import sys; print(repr(sys.stdin.read()))")
        )
        assert result.stdout.strip() == "''"
