from __future__ import annotations

import json
import math

import pytest

from tsp_playground.algs.geometry import Point
from tsp_playground.algs.heuristics import has_improving_swap
from tsp_playground.data import (
    Instance,
    circle_points,
    grid_points,
    load_instance,
    random_points,
    save_instance,
)
from tsp_playground.data.io_utils import instance_from_payload


def test_random_points_reproducible_and_in_bounds() -> None:
    a = random_points(20, seed=42, width=100.0, height=50.0, margin=5.0)
    b = random_points(20, seed=42, width=100.0, height=50.0, margin=5.0)
    assert a == b
    assert all(5.0 <= p.x <= 95.0 and 5.0 <= p.y <= 45.0 for p in a)
    assert random_points(20, seed=43) != random_points(20, seed=42)


def test_circle_points_are_convex_order() -> None:
    points = circle_points(6, radius=10.0, center=(1.0, 2.0))
    assert len(points) == 6
    for p in points:
        assert math.hypot(p.x - 1.0, p.y - 2.0) == pytest.approx(10.0)
    assert not has_improving_swap(points, list(range(6)) + [0])


def test_grid_points() -> None:
    points = grid_points(2, 3, spacing=5.0)
    assert points[0] == Point(0.0, 0.0)
    assert points[-1] == Point(10.0, 5.0)
    with pytest.raises(ValueError):
        grid_points(0, 3)


@pytest.mark.parametrize(
    "payload",
    [
        [[0, 0], [3, 4]],
        [{"x": 0, "y": 0}, {"x": 3, "y": 4, "name": "B"}],
        {"points": [[0, 0], {"x": 3, "y": 4}]},
    ],
)
def test_instance_from_payload_formats(payload) -> None:
    instance = instance_from_payload(payload)
    assert instance.points == (Point(0.0, 0.0), Point(3.0, 4.0))
    assert len(instance.names) == 2


@pytest.mark.parametrize("payload", [[], [[1]], [{"x": 1}], "nope", [[0, float("nan")]]])
def test_instance_from_payload_rejects(payload) -> None:
    with pytest.raises(ValueError):
        instance_from_payload(payload)


def test_save_and_load_instance(tmp_path) -> None:
    instance = Instance(points=(Point(1.0, 2.0), Point(-3.5, 0.25)), names=("home", None))
    target = tmp_path / "nested" / "points.json"
    save_instance(target, instance)
    raw = json.loads(target.read_text(encoding="utf-8"))
    assert raw["points"][0] == {"x": 1.0, "y": 2.0, "name": "home"}
    assert "name" not in raw["points"][1]
    assert load_instance(target) == instance


def test_instance_names_must_match() -> None:
    with pytest.raises(ValueError):
        Instance(points=(Point(0.0, 0.0),), names=("a", "b"))
