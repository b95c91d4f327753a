"""Pytest configuration - shared task helpers."""

import asyncio
from typing import Any, List, Optional

import pytest


class CountingTask:
    """Task producer that counts how often it is invoked.

    Each invocation returns a fresh coroutine that yields to the event loop
    once, then returns value or raises error.
    """

    def __init__(
        self,
        value: Any = None,
        error: Optional[BaseException] = None,
        events: Optional[List[str]] = None,
        label: str = "",
    ):
        self.value = value
        self.error = error
        self.events = events
        self.label = label
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.events is not None:
            self.events.append(f"start:{self.label}")
        return self._run()

    async def _run(self):
        await asyncio.sleep(0)
        if self.events is not None:
            self.events.append(f"end:{self.label}")
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture
def make_task():
    """Factory for CountingTask instances."""
    return CountingTask


@pytest.fixture
def boom_tasks():
    """[resolve(1), resolve(2), reject("boom"), resolve(4)]"""
    return [
        CountingTask(1),
        CountingTask(2),
        CountingTask(error=RuntimeError("boom")),
        CountingTask(4),
    ]
