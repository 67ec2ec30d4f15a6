"""
GameState entity - a read-only snapshot of the simulation at one tick.
"""

from typing import Optional, Tuple

Position = Tuple[float, float]


class GameState:
    """
    A snapshot of the game at a specific tick, handed to renderers.

    Every collection is a tuple so a renderer cannot mutate the engine's
    state through the snapshot.

    Attributes:
        tick: number of advances applied since the last reset
        snake: tuple of (x, y) from head to tail
        food: (x, y) of the single food item
        grid_size: side length of the square toroidal board
        run_state: one of IDLE, RUNNING, PAUSED, GAME_OVER
        score: points in the current run
        best_score: highest score seen, including persisted records
        heading: current unit heading
        speed: cells per second
    """

    __slots__ = (
        "tick", "snake", "food", "grid_size", "run_state",
        "score", "best_score", "heading", "speed",
    )

    def __init__(
        self,
        tick: int,
        snake,
        food: Position,
        grid_size: int,
        run_state: str,
        score: int,
        best_score: int,
        heading: Position = (1.0, 0.0),
        speed: float = 0.0,
    ):
        object.__setattr__(self, "tick", tick)
        object.__setattr__(self, "snake", tuple(snake))
        object.__setattr__(self, "food", tuple(food))
        object.__setattr__(self, "grid_size", grid_size)
        object.__setattr__(self, "run_state", run_state)
        object.__setattr__(self, "score", score)
        object.__setattr__(self, "best_score", best_score)
        object.__setattr__(self, "heading", tuple(heading))
        object.__setattr__(self, "speed", speed)

    def __setattr__(self, name, value):
        raise AttributeError("GameState is read-only")

    @property
    def head(self) -> Optional[Position]:
        return self.snake[0] if self.snake else None

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "snake": [list(p) for p in self.snake],
            "food": list(self.food),
            "grid_size": self.grid_size,
            "run_state": self.run_state,
            "score": self.score,
            "best_score": self.best_score,
            "heading": list(self.heading),
            "speed": self.speed,
        }

    def print_board(self, cells: int = 25) -> str:
        """
        Returns a string representation of the board, sampled onto a
        *cells* x *cells* character grid:
        . = empty space
        * = food
        o = snake body
        @ = snake head
        Row 0 is printed first (y grows downwards, like screen coordinates).
        """
        scale = cells / float(self.grid_size)
        board = [['.' for _ in range(cells)] for _ in range(cells)]

        def cell_of(p: Position) -> Tuple[int, int]:
            col = min(int(p[0] * scale), cells - 1)
            row = min(int(p[1] * scale), cells - 1)
            return row, col

        row, col = cell_of(self.food)
        board[row][col] = '*'

        # Draw tail first so the head wins on shared cells
        for idx in range(len(self.snake) - 1, -1, -1):
            row, col = cell_of(self.snake[idx])
            board[row][col] = '@' if idx == 0 else 'o'

        lines = ["+" + "-" * cells + "+"]
        lines.extend("|" + "".join(r) + "|" for r in board)
        lines.append("+" + "-" * cells + "+")
        lines.append(
            f"Score: {self.score}  Best: {self.best_score}  "
            f"Speed: {self.speed:.0f}  State: {self.run_state}"
        )
        return "\n".join(lines)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, state={self.run_state}, "
            f"length={len(self.snake)}, food={self.food}, score={self.score}>"
        )
