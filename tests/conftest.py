from __future__ import annotations

from typing import List

import pytest
from hypothesis import HealthCheck, settings

from tsp_playground.algs.geometry import Point
from tsp_playground.common.config import EngineConfig
from tsp_playground.common.constants import MIN_IMPROVEMENT, RNG_SEEDS, seed_everywhere
from tsp_playground.engine import TourEngine


TEST_SEED = RNG_SEEDS.get("tests", 1337)
seed_everywhere(TEST_SEED)

settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(
        HealthCheck.filter_too_much,
        HealthCheck.too_slow,
    ),
)
settings.load_profile("ci")


def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture(scope="session")
def min_improvement() -> float:
    return MIN_IMPROVEMENT


@pytest.fixture
def square_points() -> List[Point]:
    return [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)]


@pytest.fixture
def crossed_points() -> List[Point]:
    return [Point(0.0, 0.0), Point(10.0, 0.0), Point(0.0, 10.0), Point(10.0, 10.0)]


@pytest.fixture
def make_engine():
    def _make(points, **config_kwargs) -> TourEngine:
        config_kwargs.setdefault("random_seed", TEST_SEED)
        return TourEngine(points, config=EngineConfig(**config_kwargs))

    return _make
