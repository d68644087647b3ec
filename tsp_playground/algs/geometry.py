from __future__ import annotations

import math
from typing import Iterable, List, NamedTuple, Sequence


class Point(NamedTuple):
    x: float
    y: float


def as_points(raw: Iterable[Sequence[float]]) -> List[Point]:
    """Validate ``raw`` as a non-empty list of finite planar points."""
    points: List[Point] = []
    for idx, entry in enumerate(raw):
        if len(entry) != 2:
            raise ValueError(f"point #{idx} must have exactly two coordinates")
        x, y = float(entry[0]), float(entry[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"point #{idx} has non-finite coordinates")
        points.append(Point(x, y))
    if not points:
        raise ValueError("at least one point is required")
    return points


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    # Every pairwise cost in the package goes through here.
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


def path_length(points: Sequence[Sequence[float]], indices: Sequence[int]) -> float:
    """Sum of consecutive distances along ``indices`` (0 for fewer than two)."""
    total = 0.0
    for pos in range(len(indices) - 1):
        total += distance(points[indices[pos]], points[indices[pos + 1]])
    return total


def two_opt_gain(
    points: Sequence[Sequence[float]],
    indices: Sequence[int],
    i: int,
    j: int,
) -> float:
    """Length saved by replacing edges (i, i+1), (j, j+1 mod k) with (i, j), (i+1, j+1 mod k)."""
    k = len(indices)
    a = points[indices[i]]
    b = points[indices[i + 1]]
    c = points[indices[j]]
    d = points[indices[(j + 1) % k]]
    return distance(a, b) + distance(c, d) - distance(a, c) - distance(b, d)


__all__ = ["Point", "as_points", "distance", "path_length", "two_opt_gain"]
