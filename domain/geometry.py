"""
Vector helpers for the continuous, wraparound play field.

Positions and vectors are plain ``(x, y)`` float tuples.
"""

import math
from typing import Tuple

Vector = Tuple[float, float]


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    """Clamp *value* into ``[low, high]``; NaN collapses to 0."""
    if value != value:
        return 0.0
    return max(low, min(high, value))


def vector_length(v: Vector) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vector, b: Vector) -> float:
    """Plain Euclidean distance (no shortcut across the wrap seam)."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def wrap_coordinate(value: float, grid_size: float) -> float:
    """
    Map *value* back into ``[0, grid_size)``.

    Python's modulo already yields a non-negative result for a positive
    divisor, but for tiny negative inputs ``value % grid_size`` can round up
    to exactly ``grid_size``, so that case is folded back to 0.
    """
    wrapped = value % grid_size
    if wrapped >= grid_size:
        wrapped = 0.0
    return wrapped


def wrap_position(p: Vector, grid_size: float) -> Vector:
    return (wrap_coordinate(p[0], grid_size), wrap_coordinate(p[1], grid_size))


def toroidal_delta(origin: Vector, target: Vector, grid_size: float) -> Vector:
    """
    Shortest displacement from *origin* to *target* on the torus.

    Each component lies in ``[-grid_size / 2, grid_size / 2]``.
    """
    half = grid_size / 2.0
    dx = (target[0] - origin[0] + half) % grid_size - half
    dy = (target[1] - origin[1] + half) % grid_size - half
    return (dx, dy)
