"""Shared event schema for tour engine observers."""

from __future__ import annotations

from typing import Dict, List, Literal, Sequence, Tuple, TypedDict

Edge = List[int]
Source = Literal["manual", "nearest_neighbor", "random", "two_opt"]


# ---------------------------------------------------------------------------
#  Step events: one per committed mutation
# ---------------------------------------------------------------------------
class AppendEvent(TypedDict):
    type: Literal["append"]
    index: int
    position: int
    source: Source


class CloseEvent(TypedDict):
    type: Literal["close"]
    index: int
    position: int
    source: Source


class SwapEvent(TypedDict):
    type: Literal["swap"]
    start: int
    end: int
    source: Source


# ---------------------------------------------------------------------------
#  Highlight events: visual hints only, never mutate state
# ---------------------------------------------------------------------------
class SwapPreviewEvent(TypedDict):
    type: Literal["swap_preview"]
    remove: List[Edge]
    add: List[Edge]
    gain: float


class SwapResultEvent(TypedDict):
    type: Literal["swap_result"]
    edges: List[Edge]


class ClearHighlightsEvent(TypedDict):
    type: Literal["clear_highlights"]


# ---------------------------------------------------------------------------
#  Session events
# ---------------------------------------------------------------------------
class ProcessStartEvent(TypedDict):
    type: Literal["process_start"]
    name: str


class ProcessEndEvent(TypedDict):
    type: Literal["process_end"]
    name: str
    reason: Literal["completed", "interrupted", "error"]


class RefreshEvent(TypedDict):
    type: Literal["refresh"]


class SnapshotDict(TypedDict):
    tour: List[int]
    closed: bool
    route_length: float
    running: bool
    can_close: bool


EventDict = Dict[str, object]


def append_event(index: int, position: int, source: Source, *, closed: bool) -> EventDict:
    """Build an ``append`` event, or ``close`` when the append closed the tour."""
    if closed:
        return CloseEvent(type="close", index=int(index), position=int(position), source=source)
    return AppendEvent(type="append", index=int(index), position=int(position), source=source)


def swap_edges(indices: Sequence[int], i: int, j: int) -> Tuple[Edge, Edge, Edge, Edge]:
    """Return the removed pair and the added pair for a 2-opt move at ``(i, j)``."""
    k = len(indices)
    a, b = indices[i], indices[i + 1]
    c, d = indices[j], indices[(j + 1) % k]
    return [a, b], [c, d], [a, c], [b, d]


def edges_of(indices: Sequence[int]) -> List[Edge]:
    return [[indices[pos], indices[pos + 1]] for pos in range(len(indices) - 1)]


__all__ = [
    "Edge",
    "Source",
    "EventDict",
    "AppendEvent",
    "CloseEvent",
    "SwapEvent",
    "SwapPreviewEvent",
    "SwapResultEvent",
    "ClearHighlightsEvent",
    "ProcessStartEvent",
    "ProcessEndEvent",
    "RefreshEvent",
    "SnapshotDict",
    "append_event",
    "swap_edges",
    "edges_of",
]
