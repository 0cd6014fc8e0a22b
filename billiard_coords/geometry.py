"""
Geometry utilities for 2D vectors: conversion, normalization, cross products.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

UNIT_VECTOR_TOLERANCE = 1e-3


def as_vector(value: ArrayLike, name: str = "vector") -> NDArray[np.float64]:
    """
    Convert an array-like to a float64 vector of shape (2,).

    Parameters:
        value: Any 2-element sequence or array
        name: Name used in the error message

    Returns:
        Array of shape (2,)

    Raises:
        ValueError: If value does not hold exactly 2 components
    """
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{name} must have shape (2,), got {vec.shape}")
    return vec


def cross2d(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """
    Scalar 2D cross product a.x*b.y - a.y*b.x.

    For unit vectors this is the sine of the signed angle from a to b.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def normalize(vec: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Scale a vector to unit length.

    Raises:
        ValueError: If the vector has zero length
    """
    length = float(np.hypot(vec[0], vec[1]))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vec / length


def clamp_unit(x: Any) -> float:
    """Clamp an inverse-trig argument to [-1, 1]."""
    return float(np.clip(x, -1.0, 1.0))


def validate_unit_vector(
    vec: ArrayLike,
    tolerance: float = UNIT_VECTOR_TOLERANCE,
    name: str = "vector"
) -> NDArray[np.float64]:
    """
    Validate that a vector is normalized and return it renormalized.

    Parameters:
        vec: 2-element vector expected to have unit length
        tolerance: Tolerance for normalization check (|length - 1| < tolerance)
        name: Name used in the error message

    Returns:
        The vector as a float64 array of exact unit length

    Raises:
        ValueError: If vec is not approximately unit length
    """
    arr = as_vector(vec, name)
    length = float(np.hypot(arr[0], arr[1]))
    if abs(length - 1.0) >= tolerance:
        raise ValueError(
            f"{name} must be a unit vector (length 1 +/- {tolerance}), got length {length:.6f}"
        )
    return arr / length
