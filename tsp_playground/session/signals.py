from __future__ import annotations

from typing import Callable, List

from tsp_playground.visualization.events import EventDict

Listener = Callable[[EventDict], None]


class Signal:
    """Ordered listener list; ``connect`` returns the matching disconnect."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def connect(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def disconnect() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return disconnect

    def emit(self, event: EventDict) -> None:
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)


__all__ = ["Listener", "Signal"]
