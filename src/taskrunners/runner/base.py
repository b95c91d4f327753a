"""Base class for tasks runners."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar

from .config import RunnerConfig
from .result import SettledResult
from .state import RunnerState, RunnerStatus

T = TypeVar("T")

# A task is a zero-argument callable returning something awaitable
Task = Callable[[], Awaitable[T]]


class BaseTasksRunner(ABC, Generic[T]):
    """Abstract base class for runners over a fixed list of tasks.

    Owns the runner's lifecycle status and the memo store of started tasks.
    Subclasses decide how tasks are driven.

    Implementations must provide:
    - run_tasks(): Drive every task to completion
    - get_running_task(index): Result of a single task
    """

    def __init__(self, config: Optional[RunnerConfig] = None):
        self.config = config or RunnerConfig()
        self._state = RunnerState()
        self._logger = logging.getLogger(__name__)

    @property
    def status(self) -> RunnerStatus:
        """Current lifecycle status."""
        return self._state.status

    def start(self) -> None:
        """Move the runner out of the open status without running any task.

        Indexed retrieval is only allowed once the runner has been started,
        either by this method or by a full run.
        """
        if self._state.status == RunnerStatus.OPEN:
            self._state.status = RunnerStatus.PENDING
            self._logger.info(f"[{self.config.name}] Runner started")

    @abstractmethod
    async def run_tasks(self) -> List[SettledResult]:
        """Run every task.

        Returns:
            One settled result per task, in task order

        Raises:
            TasksRejectedError: If a task fails
        """
        pass

    @abstractmethod
    async def get_running_task(self, index: int) -> Any:
        """Get the result of the task at index.

        Args:
            index: Position of the task in the runner's task list

        Returns:
            The value produced by the task
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
