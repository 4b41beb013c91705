"""Execution layer: spawning the Ansible runner and inventory provider.

Tags:
    hostboard, execution
"""

from hostboard.execution.dispatcher import DispatchResult, OperationDispatcher
from hostboard.execution.runner import (
    ProcessLaunchError,
    ProcessResult,
    ProcessRunner,
    ProcessTimeoutError,
    RunnerError,
    SubprocessRunner,
)

__all__ = [
    "DispatchResult",
    "OperationDispatcher",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "RunnerError",
    "ProcessLaunchError",
    "ProcessTimeoutError",
]
