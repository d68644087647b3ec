"""Recoverable failures raised by tour commands.

Every operation validates before it mutates, so a raised ``TourError`` leaves
the tour, the history and the session exactly as they were.
"""

from __future__ import annotations


class TourError(Exception):
    """Base class for rejected tour commands."""


class InvalidIndex(TourError):
    def __init__(self, idx: int, n: int) -> None:
        super().__init__(f"point index {idx} outside [0, {n})")
        self.idx = idx
        self.n = n


class DuplicateIndex(TourError):
    def __init__(self, idx: int) -> None:
        super().__init__(f"point {idx} is already on the tour")
        self.idx = idx


class TourComplete(TourError):
    def __init__(self) -> None:
        super().__init__("tour is already closed")


class EmptyTour(TourError):
    def __init__(self) -> None:
        super().__init__("tour is empty")


class EmptyHistory(TourError):
    def __init__(self) -> None:
        super().__init__("no snapshot available")


class NothingToUndo(TourError):
    def __init__(self) -> None:
        super().__init__("nothing to undo")


class PreconditionNotMet(TourError):
    pass


__all__ = [
    "TourError",
    "InvalidIndex",
    "DuplicateIndex",
    "TourComplete",
    "EmptyTour",
    "EmptyHistory",
    "NothingToUndo",
    "PreconditionNotMet",
]
