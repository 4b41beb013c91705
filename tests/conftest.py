"""
Shared pytest fixtures for hostboard tests.

This module provides:
- ``FakeRunner``: a scripted stand-in for :class:`SubprocessRunner` that
  records every argv it is asked to run and never spawns a process
- Settings isolated from the environment and ``.env`` files
- A FastAPI ``TestClient`` wired to the fake runner

Usage:
    def test_something(client, fake_runner):
        fake_runner.stdout = "PLAY RECAP"
        resp = client.get("/widget/cpu?host=h1")
        assert fake_runner.calls
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Generator, Sequence
from pathlib import Path

import pytest
import structlog
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hostboard.api.app import create_app
from hostboard.api.deps import get_settings
from hostboard.core.settings import HostboardSettings
from hostboard.execution.runner import ProcessResult, RunnerError

# =============================================================================
# Fake process runner
# =============================================================================


class FakeRunner:
    """Scripted process runner.

    Attributes set before the call decide the outcome; ``calls`` records
    every argv in order.
    """

    def __init__(
        self,
        *,
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
        error: RunnerError | None = None,
        delay: float = 0.0,
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, ...]] = []

    async def run(self, argv: Sequence[str]) -> ProcessResult:
        self.calls.append(tuple(argv))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return ProcessResult(
            argv=tuple(argv),
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Drop the cached settings singleton and any structlog configuration."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings(tmp_path: Path) -> HostboardSettings:
    """Reference settings, ignoring environment and ``.env``."""
    return HostboardSettings(_env_file=None, static_dir=str(tmp_path / "dist"))


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def app(settings: HostboardSettings, fake_runner: FakeRunner):
    return create_app(settings=settings, runner=fake_runner)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """The :class:`FakeRunner` class, for tests that need several runners."""
    return FakeRunner
