"""RunnerState - lifecycle status and memo store of started tasks."""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class RunnerStatus(str, Enum):
    """Runner lifecycle status.

    open -> pending -> fulfilled | rejected
    """

    OPEN = "open"
    PENDING = "pending"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass
class RunnerState:
    """Mutable state owned by exactly one runner.

    running_tasks is append-only: slot i holds the future of task i and is
    written once, after slots 0..i-1.
    """

    status: RunnerStatus = RunnerStatus.OPEN
    running_tasks: List["asyncio.Future[Any]"] = field(default_factory=list)

    def has_started(self, index: int) -> bool:
        return 0 <= index < len(self.running_tasks)

    def remember(self, index: int, future: "asyncio.Future[Any]") -> None:
        """Store the future of a newly started task.

        Raises:
            RuntimeError: If index is not the next free slot
        """
        if index != len(self.running_tasks):
            raise RuntimeError(
                f"Cannot remember task {index}: next free slot is {len(self.running_tasks)}"
            )
        self.running_tasks.append(future)
