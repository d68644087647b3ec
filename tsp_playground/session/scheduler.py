"""Suspension primitive used to resume heuristic processes.

The engine only ever asks for "call me back after roughly ``delay`` seconds".
:class:`ManualScheduler` answers that with a virtual clock the host advances
explicitly (the pygame viewer feeds it frame times, tests jump it forward), so
no async runtime is involved.
"""

from __future__ import annotations

import heapq
import itertools
import math
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple

Callback = Callable[[], None]


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callback) -> None:
        ...

    @abstractmethod
    def now(self) -> float:
        ...


class ManualScheduler(Scheduler):
    def __init__(self, start: float = 0.0) -> None:
        self._clock = float(start)
        self._queue: List[Tuple[float, int, Callback]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._clock

    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callback) -> None:
        if not math.isfinite(delay) or delay < 0.0:
            raise ValueError("delay must be finite and non-negative")
        heapq.heappush(self._queue, (self._clock + delay, next(self._counter), callback))

    def advance(self, dt: float) -> int:
        """Move the clock by ``dt`` and run every callback due; return how many ran."""
        if dt < 0.0:
            raise ValueError("cannot move the clock backwards")
        target = self._clock + dt
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._clock = max(self._clock, due)
            callback()
            ran += 1
        self._clock = target
        return ran

    def run_next(self) -> bool:
        """Jump to the earliest due callback and run it."""
        if not self._queue:
            return False
        due, _, callback = heapq.heappop(self._queue)
        self._clock = max(self._clock, due)
        callback()
        return True

    def run_until_idle(self, max_callbacks: int = 1_000_000) -> int:
        ran = 0
        while self._queue:
            if ran >= max_callbacks:
                raise RuntimeError(f"scheduler still busy after {max_callbacks} callbacks")
            self.run_next()
            ran += 1
        return ran


__all__ = ["Callback", "Scheduler", "ManualScheduler"]
