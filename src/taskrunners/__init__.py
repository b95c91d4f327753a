"""taskrunners - run asynchronous tasks one at a time, in order.

Each task is a zero-argument callable returning an awaitable. A runner
starts every task at most once, whether its result is requested through a
full run or by index, and stops the sequence on the first failure.

Two methods:
- run_tasks() - Run every task, return one settled result per task
- get_running_task(index) - Run only what is needed to get one task's value

Example:
    >>> from taskrunners import SerialTasksRunner, TasksRejectedError
    >>>
    >>> runner = SerialTasksRunner(fetch, transform, store)
    >>> try:
    ...     results = await runner.run_tasks()
    ... except TasksRejectedError as e:
    ...     print(e.results)   # Settled results up to the failure
    >>> print(runner.status)   # RunnerStatus.FULFILLED or REJECTED
"""

from .exceptions import (
    TaskRunnerError,
    NotStartedError,
    IndexOutOfBoundsError,
    PrerequisiteFailedError,
    TasksRejectedError,
)
from .runner import (
    BaseTasksRunner,
    SerialTasksRunner,
    Task,
    RunnerConfig,
    RunnerState,
    RunnerStatus,
    SettledResult,
    SettledStatus,
)

__version__ = "0.1.0"

__all__ = [
    # Runners
    "BaseTasksRunner",
    "SerialTasksRunner",
    "Task",
    "RunnerConfig",
    # State
    "RunnerState",
    "RunnerStatus",
    # Results
    "SettledResult",
    "SettledStatus",
    # Errors
    "TaskRunnerError",
    "NotStartedError",
    "IndexOutOfBoundsError",
    "PrerequisiteFailedError",
    "TasksRejectedError",
]
