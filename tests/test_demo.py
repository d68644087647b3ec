from __future__ import annotations

import json

import pytest

from tsp_playground.common.config import EngineConfig
from tsp_playground.engine import TourEngine
from tsp_playground.visualization.demo import main, preset_points, run_headless


def test_headless_nearest_neighbor_square() -> None:
    engine = TourEngine(preset_points("square"))
    result = run_headless(engine, "nearest_neighbor")
    assert result["tour"] == [0, 1, 2, 3, 0]
    assert result["route_length"] == pytest.approx(40.0)
    assert result["closed"] is True


def test_headless_random_then_two_opt_is_locally_optimal() -> None:
    engine = TourEngine(preset_points("scatter"), config=EngineConfig(random_seed=1))
    result = run_headless(engine, "random+two_opt", start=3)
    assert result["closed"] is True
    assert result["tour"][0] == result["tour"][-1] == 3
    assert not engine.can_run_two_opt()


def test_main_headless_prints_json(capsys) -> None:
    main(["--preset", "circle", "--headless", "nearest_neighbor+two_opt", "--seed", "5"])
    out = capsys.readouterr().out
    payload = json.loads(out)
    assert payload["closed"] is True
    assert len(payload["tour"]) == len(preset_points("circle")) + 1


def test_main_reads_points_file(tmp_path, capsys) -> None:
    path = tmp_path / "pts.json"
    path.write_text(json.dumps([[0, 0], [10, 0], [10, 10], [0, 10]]), encoding="utf-8")
    main(["--points", str(path), "--headless", "nearest_neighbor"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["tour"] == [0, 1, 2, 3, 0]


def test_speed_scales_delays() -> None:
    config = EngineConfig().scaled(2.0)
    assert config.nn_step_delay == pytest.approx(0.25)
    with pytest.raises(ValueError):
        EngineConfig().scaled(0.0)
    with pytest.raises(ValueError):
        EngineConfig(history_limit=0)


def test_preset_points_builds_a_fresh_list_per_call() -> None:
    first = preset_points("grid")
    first.pop()
    assert len(preset_points("grid")) == 20
    assert preset_points("scatter") == preset_points("scatter")
    with pytest.raises(KeyError):
        preset_points("hexagon")
