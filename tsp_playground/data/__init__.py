"""Point-set loading and synthetic instance generation."""

from .gen_instances import circle_points, grid_points, random_points
from .io_utils import Instance, load_instance, save_instance

__all__ = [
    "Instance",
    "load_instance",
    "save_instance",
    "circle_points",
    "grid_points",
    "random_points",
]
