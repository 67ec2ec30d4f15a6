"""
Base player interface - an input source for the simulation.
"""

from typing import Optional, Tuple

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player stands in for the on-screen stick: once per tick it looks at
    the latest snapshot and reports where the stick is.
    """

    def get_vector(self, game_state: GameState) -> Optional[Tuple[float, float]]:
        """
        Return the current stick deflection given the game state.

        Args:
            game_state: Latest snapshot from the engine

        Returns:
            (x, y) with both components in [-1, 1] while the stick is held,
            or None when the stick is released (the caller pauses).
        """
        raise NotImplementedError
