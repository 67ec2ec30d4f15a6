"""
Registry for computer players.

Maps player keys (e.g. 'seeker', 'random') to player classes so the
command line and tests can pick one by name.
"""

from typing import Dict, Type

from .base import Player
from .food_seeking_player import FoodSeekingPlayer
from .random_player import RandomPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "seeker": FoodSeekingPlayer,
    "random": RandomPlayer,
}

# Canonical list of available player keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant: str = "seeker") -> Type[Player]:
    """
    Look up the player class for *variant*.

    Raises:
        ValueError: if the key is unknown
    """
    try:
        return PLAYER_VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown player variant '{variant}'. Available: {AVAILABLE_VARIANTS}"
        ) from None


def list_variants() -> Dict[str, str]:
    """Player keys with the first line of each class docstring."""
    return {
        key: (cls.__doc__ or "").strip().splitlines()[0] if cls.__doc__ else ""
        for key, cls in PLAYER_VARIANTS.items()
    }
