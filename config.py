"""
Runtime configuration for Neon Snake.

Values come from the environment (optionally a local .env file) and fall
back to the defaults in domain.constants.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from domain import constants

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    return default if raw in (None, "") else int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    return default if raw in (None, "") else float(raw)


@dataclass
class GameConfig:
    grid_size: int = constants.GRID_SIZE
    ticks_per_sec: float = constants.TICKS_PER_SEC
    speed: float = constants.DEFAULT_SPEED
    turn_directions: int = constants.CONTINUOUS_TURNING
    render_fps: float = constants.RENDER_FPS
    food_clearance: float = constants.FOOD_CLEARANCE
    eat_distance: float = constants.EAT_DISTANCE
    self_collision_distance: float = constants.SELF_COLLISION_DISTANCE
    head_exempt_segments: int = constants.HEAD_EXEMPT_SEGMENTS
    profile: str = "default"
    log_level: str = field(default="INFO")

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.ticks_per_sec <= 0:
            raise ValueError(f"ticks_per_sec must be positive, got {self.ticks_per_sec}")
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.render_fps <= 0:
            raise ValueError(f"render_fps must be positive, got {self.render_fps}")
        if self.turn_directions != constants.CONTINUOUS_TURNING and self.turn_directions < 2:
            raise ValueError(
                f"turn_directions must be 0 (continuous) or at least 2, got {self.turn_directions}"
            )
        for name in ("food_clearance", "eat_distance", "self_collision_distance"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.head_exempt_segments < 0:
            raise ValueError(
                f"head_exempt_segments must be non-negative, got {self.head_exempt_segments}"
            )

    def engine_kwargs(self) -> dict:
        """Keyword arguments accepted by SimulationEngine."""
        return {
            "grid_size": self.grid_size,
            "ticks_per_sec": self.ticks_per_sec,
            "speed": self.speed,
            "turn_directions": self.turn_directions,
            "food_clearance": self.food_clearance,
            "eat_distance": self.eat_distance,
            "self_collision_distance": self.self_collision_distance,
            "head_exempt_segments": self.head_exempt_segments,
        }


def load_config() -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Raises:
        ValueError: if a variable is not a number or fails validation
    """
    return GameConfig(
        grid_size=_env_int("SNAKE_GRID_SIZE", constants.GRID_SIZE),
        ticks_per_sec=_env_float("SNAKE_TICKS_PER_SEC", constants.TICKS_PER_SEC),
        speed=_env_float("SNAKE_SPEED", constants.DEFAULT_SPEED),
        turn_directions=_env_int("SNAKE_TURN_DIRECTIONS", constants.CONTINUOUS_TURNING),
        render_fps=_env_float("SNAKE_RENDER_FPS", constants.RENDER_FPS),
        profile=os.getenv("SNAKE_PROFILE", "default"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
