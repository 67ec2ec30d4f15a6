"""
Domain entities for the Neon Snake simulation.

This module contains the core game entities that are independent of
infrastructure concerns (database, scheduling, rendering).
"""

from .constants import IDLE, RUNNING, PAUSED, GAME_OVER, GRID_SIZE, TICKS_PER_SEC
from .geometry import clamp, distance, wrap_coordinate, wrap_position
from .motion import MotionController
from .snake import Snake
from .game_state import GameState

__all__ = [
    'IDLE', 'RUNNING', 'PAUSED', 'GAME_OVER',
    'GRID_SIZE', 'TICKS_PER_SEC',
    'clamp', 'distance', 'wrap_coordinate', 'wrap_position',
    'MotionController',
    'Snake',
    'GameState',
]
