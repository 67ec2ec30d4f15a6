"""
MotionController - maps an analog stick vector to a unit heading.
"""

import math
from typing import Optional, Tuple

from .constants import CONTINUOUS_TURNING, INPUT_EPSILON
from .geometry import Vector, clamp, vector_length


class MotionController:
    """
    Converts raw stick input into a normalized heading.

    The controller holds no game state. ``compute_heading`` either returns a
    new unit vector or ``None`` when the input is too small to act on, in
    which case the caller keeps its current heading.

    Attributes:
        turn_directions: 0 for continuous-angle steering, otherwise the
            number of evenly spaced headings the result snaps to
            (4 = quarter turns, 8 = diagonals allowed).
        epsilon: minimum stick deflection that counts as input.
    """

    def __init__(self, turn_directions: int = CONTINUOUS_TURNING, epsilon: float = INPUT_EPSILON):
        if turn_directions != CONTINUOUS_TURNING and turn_directions < 2:
            raise ValueError(
                f"turn_directions must be 0 (continuous) or at least 2, got {turn_directions}"
            )
        self.turn_directions = turn_directions
        self.epsilon = epsilon

    def compute_heading(self, raw: Vector) -> Optional[Vector]:
        x = clamp(raw[0])
        y = clamp(raw[1])
        magnitude = vector_length((x, y))
        if magnitude < self.epsilon:
            return None

        if self.turn_directions == CONTINUOUS_TURNING:
            return (x / magnitude, y / magnitude)
        return self._snap(math.atan2(y, x))

    def apply(self, raw: Vector, current: Vector) -> Vector:
        """Return the heading to hold after feeding *raw* in on top of *current*."""
        heading = self.compute_heading(raw)
        return current if heading is None else heading

    def _snap(self, angle: float) -> Tuple[float, float]:
        sector = 2 * math.pi / self.turn_directions
        snapped = round(angle / sector) * sector
        x, y = math.cos(snapped), math.sin(snapped)
        # keep axis-aligned headings exact
        if abs(x) < 1e-12:
            x = 0.0
        if abs(y) < 1e-12:
            y = 0.0
        norm = math.hypot(x, y)
        return (x / norm, y / norm)
