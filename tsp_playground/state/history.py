from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from tsp_playground.common.constants import HISTORY_LIMIT
from tsp_playground.errors import EmptyHistory
from tsp_playground.state.tour import TourSnapshot


class History:
    """Bounded LIFO of tour snapshots; pushing past ``limit`` drops the oldest."""

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._stack: Deque[TourSnapshot] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, snapshot: TourSnapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Optional[TourSnapshot]:
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> TourSnapshot:
        if not self._stack:
            raise EmptyHistory()
        return self._stack[-1]

    def clear(self) -> None:
        self._stack.clear()


__all__ = ["History"]
