"""Runner - task sequencing machinery."""

from .base import BaseTasksRunner, Task
from .config import RunnerConfig
from .result import SettledResult, SettledStatus
from .serial import SerialTasksRunner
from .state import RunnerState, RunnerStatus

__all__ = [
    "BaseTasksRunner",
    "SerialTasksRunner",
    "Task",
    "RunnerConfig",
    "RunnerState",
    "RunnerStatus",
    "SettledResult",
    "SettledStatus",
]
