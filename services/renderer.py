"""
Terminal renderer for game snapshots.
"""

import sys

from domain.constants import GAME_OVER
from domain.game_state import GameState

CLEAR_SCREEN = "\033[2J\033[H"


class TextRenderer:
    """
    Draws each snapshot as a character board.

    Args:
        cells: board resolution in characters per side
        stream: where to write (stdout by default)
        clear: emit an ANSI clear-screen before each frame
    """

    def __init__(self, cells: int = 25, stream=None, clear: bool = True):
        self.cells = cells
        self.stream = stream or sys.stdout
        self.clear = clear
        self.frames = 0

    def __call__(self, state: GameState) -> None:
        frame = state.print_board(self.cells)
        if state.run_state == GAME_OVER:
            frame += "\nGame Over"
        if self.clear:
            frame = CLEAR_SCREEN + frame
        self.stream.write(frame + "\n")
        self.stream.flush()
        self.frames += 1
