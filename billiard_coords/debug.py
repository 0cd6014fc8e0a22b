"""
Debug Logging Utilities
=======================

Helpers to switch on the package's debug output and to format values
for log lines. The library never configures logging on import; call
``setup_debug_logging`` from an application or test to see its messages.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

PACKAGE_LOGGER = "billiard_coords"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level for the package logger (default: DEBUG)

    Returns:
        The package logger
    """
    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def disable_debug_logging() -> None:
    """Remove the handler added by ``setup_debug_logging``."""
    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)


def format_point(point: Any, precision: int = 4) -> str:
    """Format a 2D point as ``(x, y)``."""
    x, y = np.asarray(point, dtype=np.float64)
    return f"({x:.{precision}f}, {y:.{precision}f})"


def format_angle(angle_rad: float, precision: int = 2) -> str:
    """Format an angle as degrees with the radian value in brackets."""
    return f"{np.rad2deg(angle_rad):.{precision}f}° ({angle_rad:.4f} rad)"
