"""
Obstacle Data Structures
========================

Immutable geometric descriptions of a billiard table:
- Wall: straight segment between two points
- Semicircle: half circle whose open face points along ``facedir``
- Circular: full circle (disk obstacle)
- Billiard: ordered, fixed collection of obstacles
- Particle: position and unit velocity of a point particle

The set of obstacle kinds is closed. Functions taking an ``Obstacle`` match
exhaustively over ``Wall``, ``Semicircle`` and ``Circular`` and reject
anything else with a ``TypeError``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from billiard_coords.geometry import (
    UNIT_VECTOR_TOLERANCE,
    as_vector,
    normalize,
    validate_unit_vector,
)


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def _point(value: ArrayLike, name: str) -> tuple[float, float]:
    """Convert a 2-element array-like to an immutable tuple of floats.

    Args:
        value: Point or vector with exactly 2 components
        name: Field name used in the error message

    Raises:
        ValidationError: If value does not have exactly 2 finite components
    """
    try:
        vec = as_vector(value, name)
    except ValueError as e:
        raise ValidationError(str(e)) from e
    if not np.all(np.isfinite(vec)):
        raise ValidationError(f"{name} must be finite, got {tuple(vec)}")
    return (float(vec[0]), float(vec[1]))


def _radius(value: float) -> float:
    """Validate that a radius is a positive finite number."""
    try:
        r = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Radius must be a number, got {value!r}") from e
    if not np.isfinite(r) or r <= 0:
        raise ValidationError(f"Radius must be positive, got {r}")
    return r


def _unit(value: ArrayLike, name: str) -> tuple[float, float]:
    """Validate a unit vector and store it renormalized."""
    try:
        vec = validate_unit_vector(value, UNIT_VECTOR_TOLERANCE, name)
    except ValueError as e:
        raise ValidationError(str(e)) from e
    return (float(vec[0]), float(vec[1]))


@dataclass(frozen=True)
class Wall:
    """A straight boundary segment from ``sp`` to ``ep``.

    Attributes:
        sp: Start point (x, y)
        ep: End point (x, y)
        normal: Unit normal pointing into the billiard domain. Defaults to the
            left-hand normal of ``ep - sp``, which points inward when the
            boundary is traversed counterclockwise.
        name: Optional label used in log and error messages

    Raises:
        ValidationError: If the endpoints coincide or the normal is zero
    """

    sp: tuple[float, float]
    ep: tuple[float, float]
    normal: tuple[float, float] | None = None
    name: str = "Wall"

    def __post_init__(self) -> None:
        sp = _point(self.sp, "sp")
        ep = _point(self.ep, "ep")
        if sp == ep:
            raise ValidationError(f"Wall endpoints must differ, got sp == ep == {sp}")

        if self.normal is None:
            normal = np.array([sp[1] - ep[1], ep[0] - sp[0]])
        else:
            normal = np.array(_point(self.normal, "normal"))
        try:
            normal = normalize(normal)
        except ValueError as e:
            raise ValidationError(f"Wall normal must be non-zero: {e}") from e

        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "sp", sp)
        object.__setattr__(self, "ep", ep)
        object.__setattr__(self, "normal", (float(normal[0]), float(normal[1])))

    @property
    def sp_array(self) -> NDArray[np.float64]:
        return np.array(self.sp, dtype=np.float64)

    @property
    def ep_array(self) -> NDArray[np.float64]:
        return np.array(self.ep, dtype=np.float64)

    @property
    def normal_array(self) -> NDArray[np.float64]:
        return np.array(self.normal, dtype=np.float64)


@dataclass(frozen=True)
class Semicircle:
    """A half circle with an open face.

    The arc lies on the side of the center opposite to ``facedir``; the
    billiard domain is inside the arc.

    Attributes:
        c: Center (x, y)
        r: Radius
        facedir: Unit vector pointing from the center through the open face
        name: Optional label used in log and error messages

    Raises:
        ValidationError: If r is not positive or facedir is not a unit vector
    """

    c: tuple[float, float]
    r: float
    facedir: tuple[float, float]
    name: str = "Semicircle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "c", _point(self.c, "c"))
        object.__setattr__(self, "r", _radius(self.r))
        object.__setattr__(self, "facedir", _unit(self.facedir, "facedir"))

    @property
    def c_array(self) -> NDArray[np.float64]:
        return np.array(self.c, dtype=np.float64)

    @property
    def facedir_array(self) -> NDArray[np.float64]:
        return np.array(self.facedir, dtype=np.float64)

    @property
    def chord_array(self) -> NDArray[np.float64]:
        """Direction along the open face, ``facedir`` rotated by +90 degrees."""
        return np.array([-self.facedir[1], self.facedir[0]], dtype=np.float64)


@dataclass(frozen=True)
class Circular:
    """A full circle of radius ``r`` around ``c``; the billiard domain is outside.

    Attributes:
        c: Center (x, y)
        r: Radius
        name: Optional label used in log and error messages

    Raises:
        ValidationError: If r is not positive
    """

    c: tuple[float, float]
    r: float
    name: str = "Circular"

    def __post_init__(self) -> None:
        object.__setattr__(self, "c", _point(self.c, "c"))
        object.__setattr__(self, "r", _radius(self.r))

    @property
    def c_array(self) -> NDArray[np.float64]:
        return np.array(self.c, dtype=np.float64)


Obstacle = Union[Wall, Semicircle, Circular]
OBSTACLE_TYPES = (Wall, Semicircle, Circular)


def unsupported_obstacle(obstacle: object) -> TypeError:
    """Build the error raised when dispatch meets an unknown obstacle kind."""
    return TypeError(
        f"Unsupported obstacle type {type(obstacle).__name__}; "
        f"expected one of Wall, Semicircle, Circular"
    )


def normalvec(obstacle: Obstacle, pos: ArrayLike) -> NDArray[np.float64]:
    """Unit normal of ``obstacle`` at ``pos``, pointing into the billiard domain.

    Args:
        obstacle: Wall, Semicircle or Circular
        pos: Point on the obstacle boundary

    Returns:
        Unit normal vector, shape (2,)

    Raises:
        TypeError: If obstacle is not one of the supported kinds
    """
    if isinstance(obstacle, Wall):
        return obstacle.normal_array
    position = as_vector(pos, "pos")
    if isinstance(obstacle, Semicircle):
        return normalize(obstacle.c_array - position)
    if isinstance(obstacle, Circular):
        return normalize(position - obstacle.c_array)
    raise unsupported_obstacle(obstacle)


@dataclass(frozen=True)
class Billiard:
    """An ordered, immutable collection of obstacles.

    The order of ``obstacles`` defines the global arclength axis.

    Attributes:
        obstacles: Tuple of Wall, Semicircle and Circular obstacles

    Raises:
        ValidationError: If no obstacles are given or an element is not an obstacle
    """

    obstacles: tuple[Obstacle, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.obstacles, Sequence):
            raise ValidationError(
                f"obstacles must be a sequence, got {type(self.obstacles).__name__}"
            )
        obstacles = tuple(self.obstacles)
        if len(obstacles) == 0:
            raise ValidationError("Billiard needs at least one obstacle")
        for i, obstacle in enumerate(obstacles):
            if not isinstance(obstacle, OBSTACLE_TYPES):
                raise ValidationError(
                    f"obstacles[{i}] must be a Wall, Semicircle or Circular, "
                    f"got {type(obstacle).__name__}"
                )
        object.__setattr__(self, "obstacles", obstacles)

    @property
    def dimension(self) -> int:
        """Number of obstacles D."""
        return len(self.obstacles)

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def __getitem__(self, index: int) -> Obstacle:
        return self.obstacles[index]


@dataclass(frozen=True)
class Particle:
    """A point particle with position and unit velocity.

    Attributes:
        pos: Position (x, y)
        vel: Unit velocity (vx, vy)

    Raises:
        ValidationError: If vel is not a unit vector
    """

    pos: tuple[float, float]
    vel: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos", _point(self.pos, "pos"))
        object.__setattr__(self, "vel", _unit(self.vel, "vel"))

    @property
    def pos_array(self) -> NDArray[np.float64]:
        return np.array(self.pos, dtype=np.float64)

    @property
    def vel_array(self) -> NDArray[np.float64]:
        return np.array(self.vel, dtype=np.float64)
