"""
Scripted player - replays a fixed list of stick events.
"""

from typing import List, Optional, Tuple

from domain.game_state import GameState
from .base import Player

StickEvent = Optional[Tuple[float, float]]


class ScriptedPlayer(Player):
    """
    Plays back *events* one per tick.

    Each event is a stick vector or None (released). Once the script runs
    out the last event is held, or the script starts over when loop=True.
    """

    def __init__(self, events: List[StickEvent], loop: bool = False):
        if not events:
            raise ValueError("ScriptedPlayer needs at least one event.")
        self.events = list(events)
        self.loop = loop
        self.index = 0

    def get_vector(self, game_state: GameState) -> StickEvent:
        if self.index >= len(self.events):
            if not self.loop:
                return self.events[-1]
            self.index = 0
        event = self.events[self.index]
        self.index += 1
        return event
