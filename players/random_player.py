"""
Random player implementation - a wandering stick.
"""

import math
import random
from typing import Optional, Tuple

from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Drifts the stick angle by a small random amount every tick.

    Large jumps would fold the snake back onto itself, so the drift is
    capped at max_turn radians per tick.
    """

    def __init__(self, max_turn: float = 0.3, rng: Optional[random.Random] = None):
        self.max_turn = max_turn
        self.rng = rng or random.Random()
        self.angle: Optional[float] = None

    def get_vector(self, game_state: GameState) -> Tuple[float, float]:
        if self.angle is None:
            hx, hy = game_state.heading
            self.angle = math.atan2(hy, hx)

        self.angle += self.rng.uniform(-self.max_turn, self.max_turn)
        deflection = self.rng.uniform(0.5, 1.0)
        return (math.cos(self.angle) * deflection, math.sin(self.angle) * deflection)
