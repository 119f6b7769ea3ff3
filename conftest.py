"""
Pytest will auto-discover / import this file called 'conftest.py'.
It defines fixtures shared by the tests living beside the code.
"""

import heapq
import itertools
from collections.abc import Callable

import pytest


class FakeScheduler:
    """Scheduler driven by a manual clock, so timer tests are deterministic."""

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._cancelled: set[int] = set()
        self._ids = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        heapq.heappush(self._queue, (self.now + delay, handle, callback))
        return handle

    def cancel(self, handle: int) -> None:
        self._cancelled.add(handle)

    @property
    def pending(self) -> int:
        return sum(1 for _, handle, _ in self._queue if handle not in self._cancelled)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every callback that becomes due."""
        end = self.now + seconds
        while self._queue and self._queue[0][0] <= end:
            when, handle, callback = heapq.heappop(self._queue)
            if handle in self._cancelled:
                continue
            self.now = when
            callback()
        self.now = end


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()
