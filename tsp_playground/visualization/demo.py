from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Dict, Iterable, List

from tsp_playground.algs.geometry import Point
from tsp_playground.common.config import EngineConfig
from tsp_playground.common.constants import RNG_SEEDS
from tsp_playground.common.log import configure_logging
from tsp_playground.data.gen_instances import circle_points, grid_points, random_points
from tsp_playground.data.io_utils import load_instance
from tsp_playground.engine import TourEngine

PRESETS: Dict[str, Callable[[], List[Point]]] = {
    "square": lambda: [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)],
    "circle": lambda: circle_points(12, radius=100.0),
    "grid": lambda: grid_points(4, 5, spacing=25.0),
    "scatter": lambda: random_points(25, seed=RNG_SEEDS["demo"]),
}


def preset_points(name: str) -> List[Point]:
    """Build the named preset; raises ``KeyError`` for unknown names."""
    return PRESETS[name]()


STRATEGIES = {
    "nearest_neighbor": ("nearest_neighbor",),
    "random": ("random",),
    "nearest_neighbor+two_opt": ("nearest_neighbor", "two_opt"),
    "random+two_opt": ("random", "two_opt"),
}


def run_headless(engine: TourEngine, strategy: str, start: int = 0) -> Dict[str, object]:
    """Start from ``start``, run each stage of ``strategy`` to the end, return the snapshot."""
    engine.select_point(start)
    starters = {
        "nearest_neighbor": engine.start_nearest_neighbor,
        "random": engine.start_random,
        "two_opt": engine.start_two_opt,
    }
    for stage in STRATEGIES[strategy]:
        if stage == "two_opt" and not engine.can_run_two_opt():
            continue
        starters[stage]()
        engine.run_until_idle()
    return dict(engine.get_snapshot())


def _load_points(args: argparse.Namespace) -> List[Point]:
    if args.points:
        return list(load_instance(args.points).points)
    if args.random is not None:
        return random_points(args.random, seed=args.seed)
    return preset_points(args.preset)


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive TSP tour construction")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="scatter")
    parser.add_argument("--points", type=str, help="JSON file with [[x, y], ...] or [{'x':..,'y':..}, ...]")
    parser.add_argument("--random", type=int, metavar="N", help="Use N uniformly random points")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["demo"])
    parser.add_argument("--speed", type=float, default=1.0, help="Animation speed multiplier")
    parser.add_argument("--headless", choices=STRATEGIES.keys(), help="Run a strategy without a window and print JSON")
    parser.add_argument("--start", type=int, default=0, help="Start point for --headless")
    parser.add_argument("--verbose", action="store_true", help="Log every committed step")
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    config = EngineConfig(random_seed=args.seed).scaled(args.speed)
    engine = TourEngine(_load_points(args), config=config)

    if args.headless:
        result = run_headless(engine, args.headless, start=args.start)
        json.dump(result, sys.stdout)
        sys.stdout.write("\n")
        return

    from tsp_playground.visualization.render import PygameViewer

    viewer = PygameViewer(engine)
    viewer.run()


if __name__ == "__main__":
    main()
