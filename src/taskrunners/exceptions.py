"""Custom exceptions for taskrunners."""

from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from taskrunners.runner.result import SettledResult


class TaskRunnerError(Exception):
    """Base class for all errors raised by a tasks runner."""

    pass


class NotStartedError(TaskRunnerError):
    """Raised when a task is requested from a runner that was never started."""

    def __init__(self, message: str = "Task runner is not yet started"):
        super().__init__(message)


class IndexOutOfBoundsError(TaskRunnerError, IndexError):
    """Raised when a requested task index is outside the runner's task list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index out of bounds: {index} (runner has {size} tasks)")


class PrerequisiteFailedError(TaskRunnerError):
    """Raised when an earlier task fails while walking up to a requested index.

    Attributes:
        index: Index of the task that failed
        requested: Index that was requested
    """

    def __init__(self, index: int, requested: int):
        self.index = index
        self.requested = requested
        super().__init__(
            f"Task {index} failed before task {requested} could be started"
        )


class TasksRejectedError(TaskRunnerError):
    """Raised when a full run stops on a failing task.

    Carries the settled results collected so far, the last one being the
    rejected record of the failing task.

    Attributes:
        results: Settled results up to and including the failure
        index: Index of the failing task
        reason: Failure message, or the raw exception when it has none
    """

    def __init__(
        self,
        results: List["SettledResult"],
        index: int,
        reason: Optional[Any] = None,
    ):
        self.results = results
        self.index = index
        self.reason = reason
        super().__init__(f"Task {index} rejected: {reason}")
