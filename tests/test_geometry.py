from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from tsp_playground.algs.geometry import Point, as_points, distance, path_length, two_opt_gain

coords = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


def test_distance_is_euclidean() -> None:
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)
    assert distance((1.0, 1.0), (1.0, 1.0)) == 0.0


@given(coords, coords, coords, coords)
def test_distance_symmetric_and_matches_hypot(ax, ay, bx, by) -> None:
    d = distance((ax, ay), (bx, by))
    assert d == pytest.approx(distance((bx, by), (ax, ay)))
    assert d == pytest.approx(math.hypot(ax - bx, ay - by), rel=1e-9, abs=1e-6)


def test_path_length_short_paths_are_zero(square_points) -> None:
    assert path_length(square_points, []) == 0.0
    assert path_length(square_points, [2]) == 0.0


def test_path_length_closed_square(square_points) -> None:
    assert path_length(square_points, [0, 1, 2, 3, 0]) == pytest.approx(40.0)


def test_two_opt_gain_on_crossed_square(crossed_points) -> None:
    tour = [0, 2, 1, 3, 0]
    assert two_opt_gain(crossed_points, tour, 1, 3) == pytest.approx(2 * math.sqrt(200) - 20.0)
    assert two_opt_gain(crossed_points, tour, 0, 2) == pytest.approx(0.0)


@pytest.mark.parametrize(
    "raw",
    [
        [],
        [(0.0, float("nan"))],
        [(0.0, 1.0, 2.0)],
        [(float("inf"), 0.0)],
    ],
)
def test_as_points_rejects_bad_input(raw) -> None:
    with pytest.raises(ValueError):
        as_points(raw)


def test_as_points_coerces_to_points() -> None:
    points = as_points([(1, 2), [3.5, 4]])
    assert points == [Point(1.0, 2.0), Point(3.5, 4.0)]
    assert all(isinstance(p, Point) for p in points)
