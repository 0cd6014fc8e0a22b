"""
Arclength parameterization of obstacle boundaries.

Each obstacle is parameterized by an arc-coordinate ``xi`` measured as:
* the distance from the start point in ``Wall``s
* the arc length counterclockwise from the open face in ``Semicircle``s
* the arc length counterclockwise from the rightmost point in ``Circular``s

A billiard chains its obstacles into one global arclength axis delimited by
``arcintervals``.
"""

import logging
from typing import Optional, Tuple, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from billiard_coords.geometry import as_vector, clamp_unit, normalize
from billiard_coords.obstacles import (
    Billiard,
    Circular,
    Obstacle,
    Semicircle,
    Wall,
    unsupported_obstacle,
)

logger = logging.getLogger(__name__)


class DomainError(ValueError):
    """
    Raised when a boundary coordinate lies outside its valid domain.

    Attributes:
        value: The offending value
        bound: The violated bound
    """

    def __init__(self, value: float, bound: float, message: str):
        self.value = value
        self.bound = bound
        self.message = message
        # args mirror the constructor so the error survives pickling
        super().__init__(value, bound, message)

    def __str__(self) -> str:
        return f"{self.message} (got {self.value!r}, bound {self.bound!r})"


# =============================================================================
# Arclengths
# =============================================================================

def totallength(obj: Union[Obstacle, Billiard]) -> float:
    """
    Total boundary length of an obstacle or of a whole billiard.

    Parameters:
        obj: Wall, Semicircle, Circular or Billiard

    Returns:
        Wall: distance between its endpoints; Semicircle: pi*r;
        Circular: 2*pi*r; Billiard: sum over its obstacles
    """
    if isinstance(obj, Billiard):
        return float(sum(totallength(o) for o in obj))
    if isinstance(obj, Wall):
        return float(np.linalg.norm(obj.ep_array - obj.sp_array))
    if isinstance(obj, Semicircle):
        return float(np.pi * obj.r)
    if isinstance(obj, Circular):
        return float(2.0 * np.pi * obj.r)
    raise unsupported_obstacle(obj)


def arcintervals(billiard: Billiard) -> NDArray[np.float64]:
    """
    Delimiters of the arclengths of the obstacles of a billiard.

    The arclength from ``s[i]`` to ``s[i+1]`` is spanned by obstacle ``i``.
    A local ``xi`` on obstacle ``i`` becomes global by adding ``s[i]``; a
    global ``xi`` becomes local by subtracting it.

    Parameters:
        billiard: Billiard with D obstacles

    Returns:
        Array of shape (D+1,) with s[0] = 0 and s[D] = totallength(billiard)
    """
    lengths = [totallength(o) for o in billiard]
    return np.concatenate(([0.0], np.cumsum(lengths, dtype=np.float64)))


# =============================================================================
# Local coordinates
# =============================================================================

def arclength(pos: ArrayLike, obstacle: Obstacle) -> float:
    """
    Arc-coordinate of a point on the obstacle boundary.

    ``pos`` is assumed to lie on the obstacle; it is not projected onto it.
    Cosine arguments are clamped to [-1, 1] to absorb rounding overshoot.

    Parameters:
        pos: Point (2,) on the obstacle
        obstacle: Wall, Semicircle or Circular

    Returns:
        Local arclength xi in [0, totallength(obstacle)]
    """
    position = as_vector(pos, "pos")

    if isinstance(obstacle, Wall):
        return float(np.linalg.norm(position - obstacle.sp_array))

    if isinstance(obstacle, Semicircle):
        # project on the open face
        d = (position - obstacle.c_array) / obstacle.r
        x = float(np.dot(d, obstacle.chord_array))
        return float(np.arccos(clamp_unit(x)) * obstacle.r)

    if isinstance(obstacle, Circular):
        d = (position - obstacle.c_array) / obstacle.r
        theta = float(np.arccos(clamp_unit(d[0])))
        if d[1] < 0:
            theta = 2.0 * np.pi - theta
        return theta * obstacle.r

    raise unsupported_obstacle(obstacle)


def real_pos(xi: float, obstacle: Obstacle) -> NDArray[np.float64]:
    """
    Convert the arc-coordinate ``xi`` on ``obstacle`` into a position.

    No bounds check is applied: ``xi`` outside [0, totallength(obstacle)]
    extrapolates the line or the trigonometric formula.

    Parameters:
        xi: Local arclength
        obstacle: Wall, Semicircle or Circular

    Returns:
        Position (2,)
    """
    if isinstance(obstacle, Wall):
        direction = normalize(obstacle.ep_array - obstacle.sp_array)
        return obstacle.sp_array + xi * direction

    if isinstance(obstacle, Semicircle):
        theta = xi / obstacle.r
        s, c = np.sin(theta), np.cos(theta)
        return obstacle.c_array - obstacle.r * (
            s * obstacle.facedir_array - c * obstacle.chord_array
        )

    if isinstance(obstacle, Circular):
        theta = xi / obstacle.r
        return obstacle.c_array + obstacle.r * np.array([np.cos(theta), np.sin(theta)])

    raise unsupported_obstacle(obstacle)


# =============================================================================
# Global coordinates
# =============================================================================

def locate_obstacle(
    xi: float,
    billiard: Billiard,
    intervals: Optional[NDArray[np.float64]] = None
) -> int:
    """
    Index of the obstacle whose arclength range contains the global ``xi``.

    Returns the first index ``i`` with ``xi <= intervals[i+1]``, so a point
    on the junction of two obstacles belongs to the earlier one.

    Parameters:
        xi: Global arclength
        billiard: Billiard the coordinate refers to
        intervals: Precomputed ``arcintervals(billiard)``

    Returns:
        Obstacle index in [0, D)

    Raises:
        DomainError: If xi is larger than the total boundary length
    """
    if intervals is None:
        intervals = arcintervals(billiard)
    index = int(np.searchsorted(intervals[1:], xi, side="left"))
    if index >= len(billiard):
        logger.debug("xi=%r beyond total length %r", xi, float(intervals[-1]))
        raise DomainError(xi, float(intervals[-1]), "xi is too large for this billiard")
    return index


def to_local(
    xi: float,
    billiard: Billiard,
    intervals: Optional[NDArray[np.float64]] = None
) -> Tuple[int, float]:
    """
    Split a global arclength into (obstacle index, local arclength).

    Raises:
        DomainError: If xi is larger than the total boundary length
    """
    if intervals is None:
        intervals = arcintervals(billiard)
    index = locate_obstacle(xi, billiard, intervals)
    return index, float(xi - intervals[index])


def to_global(xi: float, index: int, intervals: NDArray[np.float64]) -> float:
    """Shift a local arclength on obstacle ``index`` onto the global axis."""
    if not 0 <= index < len(intervals) - 1:
        raise IndexError(
            f"obstacle index {index} out of range for {len(intervals) - 1} obstacles"
        )
    return float(xi + intervals[index])
