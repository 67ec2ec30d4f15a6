"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) floats from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[float, float]]):
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[float, float]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head}>"
