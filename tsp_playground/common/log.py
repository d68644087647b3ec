from __future__ import annotations

import logging

LOGGER = logging.getLogger("tsp_playground")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the package logger once."""
    LOGGER.setLevel(level)
    if LOGGER.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s", "%H:%M:%S"
    )
    handler.setFormatter(formatter)
    LOGGER.addHandler(handler)


__all__ = ["LOGGER", "configure_logging"]
