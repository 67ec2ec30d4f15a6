"""
Input sources for Neon Snake.

This module contains the stick abstraction and the computer players that
produce stick vectors for the simulation.
"""

from .base import Player
from .random_player import RandomPlayer
from .food_seeking_player import FoodSeekingPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'FoodSeekingPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
