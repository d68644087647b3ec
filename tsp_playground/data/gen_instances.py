"""Synthetic point sets for demos and tests.

``random_points`` samples through ``numpy.random.default_rng`` so a seed
reproduces the same instance on every platform.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from tsp_playground.algs.geometry import Point


def random_points(
    n: int,
    seed: int,
    *,
    width: float = 1000.0,
    height: float = 1000.0,
    margin: float = 40.0,
) -> List[Point]:
    if n < 1:
        raise ValueError("n must be positive")
    if width <= 2 * margin or height <= 2 * margin:
        raise ValueError("margin leaves no room for points")
    rng = np.random.default_rng(seed)
    xs = rng.uniform(margin, width - margin, size=n)
    ys = rng.uniform(margin, height - margin, size=n)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def circle_points(n: int, radius: float = 100.0, center: Tuple[float, float] = (0.0, 0.0)) -> List[Point]:
    """``n`` points on a circle in angular order (a convex, 2-opt optimal instance)."""
    if n < 1:
        raise ValueError("n must be positive")
    if radius <= 0.0:
        raise ValueError("radius must be positive")
    angles = np.linspace(0.0, 2.0 * math.pi, num=n, endpoint=False)
    cx, cy = center
    return [Point(float(cx + radius * np.cos(a)), float(cy + radius * np.sin(a))) for a in angles]


def grid_points(rows: int, cols: int, spacing: float = 10.0) -> List[Point]:
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be positive")
    return [Point(c * spacing, r * spacing) for r in range(rows) for c in range(cols)]


__all__ = ["random_points", "circle_points", "grid_points"]
