from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tsp_playground.algs.geometry import Point, as_points


@dataclass(frozen=True, slots=True)
class Instance:
    points: Tuple[Point, ...]
    names: Tuple[Optional[str], ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(as_points(self.points)))
        names = tuple(self.names) if self.names else (None,) * len(self.points)
        if len(names) != len(self.points):
            raise ValueError("names must match points one-to-one")
        object.__setattr__(self, "names", names)


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _parse_record(idx: int, entry: Any) -> Tuple[Tuple[float, float], Optional[str]]:
    if isinstance(entry, dict):
        if "x" not in entry or "y" not in entry:
            raise ValueError(f"point #{idx} needs 'x' and 'y'")
        name = entry.get("name")
        return (float(entry["x"]), float(entry["y"])), (str(name) if name is not None else None)
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return (float(entry[0]), float(entry[1])), None
    raise ValueError(f"point #{idx} must be [x, y] or {{'x': .., 'y': ..}}")


def instance_from_payload(payload: Any) -> Instance:
    if isinstance(payload, dict):
        payload = payload.get("points")
    if not isinstance(payload, list):
        raise ValueError("expected a list of points")
    coords: List[Tuple[float, float]] = []
    names: List[Optional[str]] = []
    for idx, entry in enumerate(payload):
        xy, name = _parse_record(idx, entry)
        coords.append(xy)
        names.append(name)
    return Instance(points=tuple(as_points(coords)), names=tuple(names))


def load_instance(path: str | Path) -> Instance:
    with Path(path).open("r", encoding="utf-8") as handle:
        return instance_from_payload(json.load(handle))


def instance_to_payload(points: Sequence[Point], names: Sequence[Optional[str]] = ()) -> Dict[str, Any]:
    records = []
    for idx, (x, y) in enumerate(points):
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"point #{idx} has non-finite coordinates")
        record: Dict[str, Any] = {"x": float(x), "y": float(y)}
        if idx < len(names) and names[idx] is not None:
            record["name"] = names[idx]
        records.append(record)
    return {"points": records}


def save_instance(path: str | Path, instance: Instance) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(instance_to_payload(instance.points, instance.names), handle, indent=2, allow_nan=False)


__all__ = [
    "Instance",
    "instance_from_payload",
    "instance_to_payload",
    "load_instance",
    "save_instance",
]
