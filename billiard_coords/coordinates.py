"""
Boundary (Birkhoff) coordinates.

Converts between real coordinates ``pos, vel`` of a particle on an obstacle
and boundary coordinates ``xi, sphi``: the arc-coordinate of the collision
point and the sine of the angle between the velocity and the normal vector.
"""

import logging
import math
from typing import Optional, Tuple, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from billiard_coords.arclength import (
    DomainError,
    arclength,
    arcintervals,
    real_pos,
    to_global,
    to_local,
)
from billiard_coords.debug import format_point
from billiard_coords.geometry import as_vector, clamp_unit, cross2d
from billiard_coords.obstacles import Billiard, Obstacle, Particle, normalvec

logger = logging.getLogger(__name__)

BoundaryCoords = Tuple[float, float]
RealCoords = Tuple[NDArray[np.float64], NDArray[np.float64]]


def to_bcoords(pos: ArrayLike, vel: ArrayLike, obstacle: Obstacle) -> BoundaryCoords:
    """
    Convert real coordinates ``pos, vel`` into boundary coordinates ``xi, sphi``.

    ``pos`` is assumed to lie on the obstacle. ``sphi`` is the 2D cross
    product of ``vel`` with the normal at ``pos``, which is the sine of the
    angle between them only if ``vel`` is a unit vector; ``vel`` is not
    normalized here.

    Parameters:
        pos: Position (2,) on the obstacle
        vel: Unit velocity (2,)
        obstacle: Wall, Semicircle or Circular

    Returns:
        Tuple (xi, sphi) with xi the local arclength (see ``arclength``)
    """
    position = as_vector(pos, "pos")
    velocity = as_vector(vel, "vel")
    n = normalvec(obstacle, position)
    sphi = cross2d(velocity, n)
    xi = arclength(position, obstacle)
    return xi, sphi


def particle_to_bcoords(particle: Particle, obstacle: Obstacle) -> BoundaryCoords:
    """Boundary coordinates of a particle sitting on ``obstacle``."""
    return to_bcoords(particle.pos_array, particle.vel_array, obstacle)


def to_global_bcoords(
    pos: ArrayLike,
    vel: ArrayLike,
    billiard: Billiard,
    index: int,
    intervals: Optional[NDArray[np.float64]] = None
) -> BoundaryCoords:
    """
    Boundary coordinates on the global arclength axis of ``billiard``.

    Parameters:
        pos: Position (2,) on obstacle ``index``
        vel: Unit velocity (2,)
        billiard: Billiard containing the obstacle
        index: Index of the obstacle ``pos`` lies on
        intervals: Precomputed ``arcintervals(billiard)``

    Returns:
        Tuple (xi, sphi) with xi measured along the whole billiard boundary

    Raises:
        IndexError: If index does not name an obstacle of the billiard
    """
    if intervals is None:
        intervals = arcintervals(billiard)
    if not 0 <= index < len(billiard):
        raise IndexError(f"obstacle index {index} out of range for {len(billiard)} obstacles")
    xi, sphi = to_bcoords(pos, vel, billiard[index])
    return to_global(xi, index, intervals), sphi


def _check_sphi(sphi: float) -> None:
    if not abs(sphi) <= 1:
        logger.debug("rejecting sphi=%r", sphi)
        raise DomainError(sphi, 1.0, "|sin phi| must not be larger than 1")


def _velocity(sphi: float, n: NDArray[np.float64]) -> NDArray[np.float64]:
    """Reversed normal rotated by the angle whose sine is ``sphi``."""
    cphi = math.cos(math.asin(sphi))
    return np.array([
        -n[0] * cphi + n[1] * sphi,
        -n[0] * sphi - n[1] * cphi,
    ])


def from_bcoords(
    xi: float,
    sphi: float,
    target: Union[Obstacle, Billiard],
    return_obstacle: bool = False,
    intervals: Optional[NDArray[np.float64]] = None
) -> Union[RealCoords, Tuple[NDArray[np.float64], NDArray[np.float64], int]]:
    """
    Convert boundary coordinates ``xi, sphi`` into real coordinates ``pos, vel``.

    This is the inverse of ``to_bcoords``. With an obstacle as ``target``,
    ``xi`` is the local arclength on it. With a billiard, ``xi`` is measured
    along the whole boundary and the obstacle it falls on is looked up in
    the interval table.

    The returned velocity satisfies ``cross2d(vel, n) == sphi`` and
    ``dot(vel, n) == -cos(asin(sphi))`` for the normal ``n`` at ``pos``.

    Parameters:
        xi: Arclength (local for an obstacle, global for a billiard)
        sphi: Sine of the angle between velocity and normal, in [-1, 1]
        target: Obstacle or Billiard
        return_obstacle: Billiard only; also return the obstacle index
        intervals: Billiard only; precomputed ``arcintervals(target)``

    Returns:
        (pos, vel), or (pos, vel, index) when return_obstacle is set

    Raises:
        DomainError: If |sphi| > 1, or if xi exceeds the billiard's total length
        TypeError: If return_obstacle or intervals is given with an obstacle target
    """
    _check_sphi(sphi)

    if isinstance(target, Billiard):
        index, local_xi = to_local(xi, target, intervals)
        obstacle = target[index]
        pos = real_pos(local_xi, obstacle)
        vel = _velocity(sphi, normalvec(obstacle, pos))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "xi=%.6g on obstacle %d (%s), local xi=%.6g, pos=%s",
                xi, index, obstacle.name, local_xi, format_point(pos),
            )
        return (pos, vel, index) if return_obstacle else (pos, vel)

    if return_obstacle or intervals is not None:
        raise TypeError("return_obstacle/intervals require a Billiard target")
    pos = real_pos(xi, target)
    vel = _velocity(sphi, normalvec(target, pos))
    return pos, vel


def reflection_angle(particle: Particle, obstacle: Obstacle) -> float:
    """
    Signed angle between the particle velocity and the obstacle normal.

    Computed directly from the current velocity, so it can be evaluated on
    the velocity before the collision is resolved.

    Parameters:
        particle: Particle on the obstacle
        obstacle: Wall, Semicircle or Circular

    Returns:
        Angle in [-pi, pi]; negative when cross2d(vel, n) < 0
    """
    vel = particle.vel_array
    n = normalvec(obstacle, particle.pos_array)
    phi = math.acos(clamp_unit(np.dot(vel, n)))
    if cross2d(vel, n) < 0:
        phi = -phi
    return phi
