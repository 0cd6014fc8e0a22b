"""Pytest configuration and shared fixtures."""

import pytest

from billiard_coords import Billiard, Circular, Semicircle, Wall


@pytest.fixture
def unit_wall():
    """Wall from (0, 0) to (1, 0)."""
    return Wall((0.0, 0.0), (1.0, 0.0))


@pytest.fixture
def unit_semicircle():
    """Semicircle of radius 1 at the origin, open face towards +x."""
    return Semicircle((0.0, 0.0), 1.0, (1.0, 0.0))


@pytest.fixture
def circle_r2():
    """Circle of radius 2 at the origin."""
    return Circular((0.0, 0.0), 2.0)


@pytest.fixture
def stadium():
    """Stadium of straight length 1 and cap radius 0.5, boundary traversed CCW.

    Total boundary length is 2 + pi.
    """
    return Billiard((
        Wall((0.0, 0.0), (1.0, 0.0), name="bottom"),
        Semicircle((1.0, 0.5), 0.5, (-1.0, 0.0), name="right cap"),
        Wall((1.0, 1.0), (0.0, 1.0), name="top"),
        Semicircle((0.0, 0.5), 0.5, (1.0, 0.0), name="left cap"),
    ))


@pytest.fixture
def mixed_billiard():
    """Square table with a disk obstacle in the middle."""
    return Billiard((
        Wall((0.0, 0.0), (2.0, 0.0)),
        Wall((2.0, 0.0), (2.0, 2.0)),
        Wall((2.0, 2.0), (0.0, 2.0)),
        Wall((0.0, 2.0), (0.0, 0.0)),
        Circular((1.0, 1.0), 0.3),
    ))
