"""SerialTasksRunner - runs tasks one at a time, in order, stopping on failure."""

import asyncio
import operator
from typing import Any, Iterator, List, Optional, Tuple

from taskrunners.exceptions import (
    IndexOutOfBoundsError,
    NotStartedError,
    PrerequisiteFailedError,
    TasksRejectedError,
)
from .base import BaseTasksRunner, Task, T
from .config import RunnerConfig
from .result import SettledResult
from .state import RunnerStatus


class SerialTasksRunner(BaseTasksRunner[T]):
    """Serial tasks runner.

    Starts each task lazily and at most once, in task order. Started tasks
    are kept as futures in the memo store so that a full run and any number
    of indexed retrievals share the same executions.

    Example:
        >>> runner = SerialTasksRunner(fetch_config, migrate, deploy)
        >>> results = await runner.run_tasks()
        >>> [r.value for r in results]
        [...]

        >>> runner = SerialTasksRunner(fetch_config, migrate, deploy)
        >>> runner.start()
        >>> await runner.get_running_task(1)  # runs fetch_config, then migrate
    """

    def __init__(self, *tasks: Task[T], config: Optional[RunnerConfig] = None):
        """Initialize runner.

        Args:
            *tasks: Zero-argument callables returning awaitables, in run order
            config: Runner configuration (default: RunnerConfig())

        Raises:
            TypeError: If a task is not callable
        """
        super().__init__(config)

        for idx, task in enumerate(tasks):
            if not callable(task):
                raise TypeError(f"Task {idx} is not callable: {task!r}")

        self._tasks: Tuple[Task[T], ...] = tuple(tasks)

    @property
    def tasks(self) -> Tuple[Task[T], ...]:
        """Task producers, in run order."""
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __repr__(self) -> str:
        return (
            f"SerialTasksRunner(name='{self.config.name}', tasks={len(self)}, "
            f"started={len(self._state.running_tasks)}, status={self.status.value})"
        )

    async def run_tasks(self) -> List[SettledResult]:
        """Run every task in order, one at a time.

        Each task is awaited before the next one is started. Tasks already
        started by an earlier call are reused, never restarted.

        Returns:
            One fulfilled result per task, in task order

        Raises:
            TasksRejectedError: On the first failing task. Its results hold
                the fulfilled records before the failure and the rejected
                record of the failing task. Later tasks are not started.
        """
        self.start()

        name = self.config.name
        self._logger.info(f"[{name}] Run start - Tasks: {len(self)}")

        results: List[SettledResult] = []
        for index, future in self._iterate_tasks():
            # Shielded: a cancelled caller must not cancel the shared task
            try:
                value = await asyncio.shield(future)
            except Exception as e:
                # Stop the sequence on the first failure
                self._state.status = RunnerStatus.REJECTED
                reason = str(e) or e
                results.append(SettledResult.rejected(reason))
                self._logger.error(f"[{name}] Task {index} rejected: {reason!r}")
                self._logger.info(
                    f"[{name}] Run end - Status: {self.status.value} "
                    f"({len(results)}/{len(self)} settled)"
                )
                raise TasksRejectedError(results, index, reason) from e

            results.append(SettledResult.fulfilled(value))
            self._log_fulfilled(index, value)

        self._state.status = RunnerStatus.FULFILLED
        self._logger.info(f"[{name}] Run end - Status: {self.status.value}")
        return results

    async def get_running_task(self, index: int) -> Any:
        """Get the value of the task at index, running only what is needed.

        If the task was already started it is reused. Otherwise every earlier
        task is started (or reused) and awaited first, then the task itself.

        Args:
            index: Position of the task in the runner's task list

        Returns:
            The value produced by the task

        Raises:
            NotStartedError: If the runner is still open
            IndexOutOfBoundsError: If index is outside the task list
            PrerequisiteFailedError: If an earlier task fails; the requested
                task is then not started
            Exception: Whatever the requested task itself raises
        """
        if self._state.status == RunnerStatus.OPEN:
            raise NotStartedError()

        index = operator.index(index)
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfBoundsError(index, len(self._tasks))

        if self._state.has_started(index):
            return await asyncio.shield(self._state.running_tasks[index])

        for current, future in self._iterate_tasks():
            if current == index:
                return await asyncio.shield(future)

            try:
                await asyncio.shield(future)
            except Exception as e:
                self._logger.warning(
                    f"[{self.config.name}] Task {current} failed, "
                    f"cannot start task {index}"
                )
                raise PrerequisiteFailedError(current, index) from e

    def _iterate_tasks(self) -> Iterator[Tuple[int, "asyncio.Future[T]"]]:
        """Yield (index, future) for each task in order, starting lazily.

        A task is started only when the iteration reaches it, so a caller
        that stops iterating leaves the remaining tasks untouched.
        """
        for index in range(len(self._tasks)):
            yield index, self._ensure_started(index)

    def _ensure_started(self, index: int) -> "asyncio.Future[T]":
        """Return the memoized future of a task, starting it if needed."""
        if self._state.has_started(index):
            self._logger.debug(f"[{self.config.name}] Task {index} - Reusing")
            return self._state.running_tasks[index]

        future = self._start_task(index)
        self._state.remember(index, future)
        return future

    def _start_task(self, index: int) -> "asyncio.Future[T]":
        """Invoke a task producer and wrap its awaitable in a future.

        A producer that raises, or returns something that is not awaitable,
        still yields a future (an already failed one) so it is never invoked
        a second time.
        """
        self._logger.debug(f"[{self.config.name}] Task {index} - Start")
        try:
            return asyncio.ensure_future(self._tasks[index]())
        except Exception as e:
            future = asyncio.get_running_loop().create_future()
            future.set_exception(e)
            return future

    def _log_fulfilled(self, index: int, value: Any) -> None:
        if self.config.log_values:
            self._logger.debug(
                f"[{self.config.name}] Task {index} - Fulfilled: {value!r}"
            )
        else:
            self._logger.debug(f"[{self.config.name}] Task {index} - Fulfilled")
