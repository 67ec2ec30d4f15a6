"""
Food-seeking player - steers toward the food along the shortest wrapped path.
"""

import math
from typing import Tuple

from domain.game_state import GameState
from domain.geometry import toroidal_delta
from .base import Player


class FoodSeekingPlayer(Player):
    """
    Turns the current heading toward the food by at most max_turn radians
    per tick, so the snake arcs around instead of reversing into itself.
    """

    def __init__(self, max_turn: float = 0.25):
        self.max_turn = max_turn

    def get_vector(self, game_state: GameState) -> Tuple[float, float]:
        dx, dy = toroidal_delta(game_state.head, game_state.food, game_state.grid_size)
        hx, hy = game_state.heading
        if dx == 0 and dy == 0:
            return (hx, hy)

        current = math.atan2(hy, hx)
        target = math.atan2(dy, dx)
        # Signed difference in (-pi, pi]
        diff = (target - current + math.pi) % (2 * math.pi) - math.pi
        diff = max(-self.max_turn, min(self.max_turn, diff))
        angle = current + diff
        return (math.cos(angle), math.sin(angle))
