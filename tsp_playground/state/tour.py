"""Ordered visiting sequence over a fixed point set.

A tour of ``k`` entries over ``n`` points is valid only for ``k <= n`` with
pairwise distinct entries, or for ``k == n + 1`` where the last entry repeats
the first (the closed tour). Every mutator validates before touching the
underlying list, so a rejected call leaves the tour unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from tsp_playground.algs.geometry import Point, path_length
from tsp_playground.errors import DuplicateIndex, EmptyTour, InvalidIndex, TourComplete


@dataclass(frozen=True)
class TourSnapshot:
    indices: Tuple[int, ...]
    n: int

    @property
    def closed(self) -> bool:
        return len(self.indices) == self.n + 1


class Tour:
    def __init__(self, points: Sequence[Point]) -> None:
        if not points:
            raise ValueError("a tour needs at least one point")
        self._points = points
        self._indices: List[int] = []
        self._visited: Set[int] = set()

    # ------------------------------------------------------------------ reads
    @property
    def n(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Sequence[Point]:
        return self._points

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)

    def __getitem__(self, pos: int) -> int:
        return self._indices[pos]

    def __contains__(self, idx: object) -> bool:
        return idx in self._visited

    def length(self) -> int:
        return len(self._indices)

    @property
    def last(self) -> Optional[int]:
        return self._indices[-1] if self._indices else None

    def visited_count(self) -> int:
        return len(self._visited)

    def unvisited(self) -> List[int]:
        return [idx for idx in range(self.n) if idx not in self._visited]

    def route_length(self) -> float:
        return path_length(self._points, self._indices)

    def is_closed(self) -> bool:
        return len(self._indices) == self.n + 1

    def can_close(self) -> bool:
        k = len(self._indices)
        return k == self.n and self._indices[0] != self._indices[k - 1]

    # ------------------------------------------------------------------ mutation
    def check_append(self, idx: int) -> None:
        """Raise the error ``append(idx)`` would raise, without mutating."""
        if not 0 <= idx < self.n:
            raise InvalidIndex(idx, self.n)
        if self.is_closed():
            raise TourComplete()
        if not self._indices:
            return
        if idx in self._visited:
            if self.can_close() and idx == self._indices[0]:
                return
            raise DuplicateIndex(idx)

    def append(self, idx: int) -> int:
        """Append ``idx`` and return its position; closing is the only legal repeat."""
        self.check_append(idx)
        self._indices.append(idx)
        self._visited.add(idx)
        return len(self._indices) - 1

    def pop_last(self) -> int:
        if not self._indices:
            raise EmptyTour()
        idx = self._indices.pop()
        # After popping the closing entry the start point is still on the tour.
        if idx not in self._indices:
            self._visited.discard(idx)
        return idx

    def reverse_segment(self, start: int, end: int) -> None:
        """Reverse ``tour[start..end]`` in place (2-opt move on a closed tour).

        The endpoints of a closed tour are fixed, so ``start >= 1`` and
        ``end <= k - 2`` are required.
        """
        if not self.is_closed():
            raise ValueError("2-opt moves need a closed tour")
        if not 1 <= start < end <= len(self._indices) - 2:
            raise ValueError(f"segment [{start}, {end}] would move a tour endpoint")
        self._indices[start : end + 1] = self._indices[start : end + 1][::-1]

    # ------------------------------------------------------------------ snapshots
    def snapshot(self) -> TourSnapshot:
        return TourSnapshot(indices=tuple(self._indices), n=self.n)

    def restore(self, snapshot: TourSnapshot) -> None:
        if snapshot.n != self.n:
            raise ValueError(f"snapshot covers {snapshot.n} points, tour has {self.n}")
        self._indices = list(snapshot.indices)
        self._visited = set(self._indices)

    def clear(self) -> None:
        self._indices.clear()
        self._visited.clear()


__all__ = ["Tour", "TourSnapshot"]
