import argparse
import json
import logging
import random
import threading
import uuid
from typing import Dict, List, Optional, Tuple

from config import GameConfig, load_config
from domain.constants import (
    IDLE, RUNNING, PAUSED, GAME_OVER,
    GRID_SIZE, TICKS_PER_SEC, DEFAULT_SPEED, MIN_SPEED, MAX_SPEED,
    FOOD_CLEARANCE, EAT_DISTANCE, SELF_COLLISION_DISTANCE, HEAD_EXEMPT_SEGMENTS,
    INITIAL_LENGTH, FOOD_PLACEMENT_ATTEMPTS, CONTINUOUS_TURNING, SPEED_STEP,
)
from domain.game_state import GameState
from domain.geometry import Vector, distance, wrap_coordinate, wrap_position
from domain.motion import MotionController
from domain.snake import Snake
from players import AVAILABLE_VARIANTS, RandomPlayer, get_player_class, list_variants

logger = logging.getLogger(__name__)


def bound_speed(speed: float) -> float:
    if speed != speed:
        return DEFAULT_SPEED
    return max(MIN_SPEED, min(MAX_SPEED, float(speed)))


class SimulationEngine:
    """
    Owns the snake simulation:
      - Board (grid_size x grid_size, toroidal, continuous coordinates)
      - Snake, heading and the single food item
      - Score and best score
      - Run state (IDLE, RUNNING, PAUSED, GAME_OVER)

    advance() is driven by an external fixed-rate scheduler. Every public
    method takes the same re-entrant lock, so ticks never overlap and
    get_current_state() never sees a half-applied tick.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        ticks_per_sec: float = TICKS_PER_SEC,
        speed: float = DEFAULT_SPEED,
        turn_directions: int = CONTINUOUS_TURNING,
        food_clearance: float = FOOD_CLEARANCE,
        eat_distance: float = EAT_DISTANCE,
        self_collision_distance: float = SELF_COLLISION_DISTANCE,
        head_exempt_segments: int = HEAD_EXEMPT_SEGMENTS,
        best_score_store=None,
        rng: Optional[random.Random] = None,
    ):
        self.grid_size = grid_size
        self.ticks_per_sec = ticks_per_sec
        self.food_clearance = food_clearance
        self.eat_distance = eat_distance
        self.self_collision_distance = self_collision_distance
        self.head_exempt_segments = head_exempt_segments
        self.motion = MotionController(turn_directions)
        self.best_score_store = best_score_store
        self.rng = rng or random.Random()

        self._lock = threading.RLock()
        self.speed = bound_speed(speed)
        self.step_distance = self.speed / ticks_per_sec

        self.best_score = 0
        if best_score_store is not None:
            self.best_score = max(0, int(best_score_store.load_best_score()))

        self.snake = Snake([])
        self.heading: Vector = (1.0, 0.0)
        self.food: Vector = (0.0, 0.0)
        self.score = 0
        self.tick = 0
        self.run_state = IDLE
        self.reset()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a fresh run: centred 4-segment snake heading +X, score 0, IDLE."""
        with self._lock:
            cx = cy = self.grid_size / 2
            self.snake = Snake([
                wrap_position((cx - i, cy), self.grid_size) for i in range(INITIAL_LENGTH)
            ])
            self.heading = (1.0, 0.0)
            self.score = 0
            self.tick = 0
            self.run_state = IDLE
            self.place_food()
            logger.info(f"New game: grid {self.grid_size}, speed {self.speed:g}, best {self.best_score}")

    def set_running(self, running: bool) -> None:
        """IDLE/PAUSED -> RUNNING on True, RUNNING -> PAUSED on False; ignored after game over."""
        with self._lock:
            if self.run_state == GAME_OVER:
                return
            if running and self.run_state in (IDLE, PAUSED):
                self.run_state = RUNNING
                logger.debug("Running")
            elif not running and self.run_state == RUNNING:
                self.run_state = PAUSED
                logger.debug("Paused")

    @property
    def game_over(self) -> bool:
        return self.run_state == GAME_OVER

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def steer(self, raw: Vector) -> Vector:
        """Feed a stick vector through the motion controller and keep the result."""
        with self._lock:
            self.heading = self.motion.apply(raw, self.heading)
            return self.heading

    def handle_input(self, raw: Optional[Vector]) -> None:
        """
        Apply one input-source event.

        A vector means the stick is held: steer and make sure the run is
        moving. None means the stick was released: pause.
        """
        with self._lock:
            if raw is None:
                self.set_running(False)
                return
            self.steer(raw)
            self.set_running(True)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------

    def set_speed(self, speed: float) -> None:
        """Set cells per second, clamped to [MIN_SPEED, MAX_SPEED]."""
        with self._lock:
            self.speed = bound_speed(speed)
            self.step_distance = self.speed / self.ticks_per_sec
            logger.info(f"Speed set to {self.speed:g} cells/s (step {self.step_distance:.3f})")

    def cycle_speed(self) -> float:
        """Step the speed 2 -> 4 -> ... -> 12 -> 2 and return the new value."""
        with self._lock:
            next_speed = self.speed + SPEED_STEP
            if next_speed > MAX_SPEED:
                next_speed = MIN_SPEED
            self.set_speed(next_speed)
            return self.speed

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """
        Execute one tick:
          1) Do nothing unless RUNNING
          2) Move the head one step along the heading, wrapping at the edges
          3) Eat (grow + score + new food) or drop the tail
          4) Check the head against the body, skipping the leading segments
        """
        with self._lock:
            if self.run_state != RUNNING:
                return

            hx, hy = self.snake.head
            dx, dy = self.heading
            new_head = wrap_position(
                (hx + dx * self.step_distance, hy + dy * self.step_distance),
                self.grid_size,
            )
            self.snake.positions.appendleft(new_head)
            self.tick += 1

            if distance(new_head, self.food) < self.eat_distance:
                self.score += 1
                logger.debug(f"Food eaten at {new_head}, score {self.score}")
                self.place_food()
            else:
                self.snake.positions.pop()

            if self.check_self_collision(self.snake.positions):
                self._end_game()

    def check_self_collision(self, positions) -> bool:
        """True if the head (index 0) is too close to any segment past the exempt ones."""
        head = positions[0]
        for idx, segment in enumerate(positions):
            if idx < self.head_exempt_segments:
                continue
            if distance(segment, head) < self.self_collision_distance:
                return True
        return False

    def _end_game(self) -> None:
        self.run_state = GAME_OVER
        logger.info(f"Game over after {self.tick} ticks with score {self.score}")
        if self.score > self.best_score:
            self.best_score = self.score
            logger.info(f"New best score: {self.best_score}")
            if self.best_score_store is not None:
                self.best_score_store.save_best_score(self.best_score)

    def place_food(self) -> Vector:
        """
        Put the food somewhere at least food_clearance away from every segment.

        Gives up after FOOD_PLACEMENT_ATTEMPTS samples and then places the
        food anywhere, even on the snake. That can only happen on a nearly
        full board and is accepted.
        """
        with self._lock:
            for _ in range(FOOD_PLACEMENT_ATTEMPTS):
                candidate = self._random_position()
                if all(distance(candidate, s) >= self.food_clearance for s in self.snake.positions):
                    self.food = candidate
                    return self.food

            logger.warning(f"No free spot for food after {FOOD_PLACEMENT_ATTEMPTS} attempts; placing anyway")
            self.food = self._random_position()
            return self.food

    def _random_position(self) -> Vector:
        return (
            wrap_coordinate(self.rng.random() * self.grid_size, self.grid_size),
            wrap_coordinate(self.rng.random() * self.grid_size, self.grid_size),
        )

    # ------------------------------------------------------------------
    # Direct setup (scenarios, tests, replays)
    # ------------------------------------------------------------------

    def set_snake(self, positions: List[Tuple[float, float]], heading: Optional[Vector] = None) -> None:
        """Replace the snake body (head first). Positions must lie on the board."""
        if len(positions) < INITIAL_LENGTH:
            raise ValueError(f"Snake needs at least {INITIAL_LENGTH} segments, got {len(positions)}.")
        for (x, y) in positions:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"Segment out of bounds at {(x, y)}.")
        with self._lock:
            self.snake = Snake(positions)
            if heading is not None:
                self.heading = self.motion.apply(heading, self.heading)

    def set_food(self, position: Tuple[float, float]) -> None:
        x, y = position
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(f"Food out of bounds at {(x, y)}.")
        with self._lock:
            self.food = (float(x), float(y))

    def get_current_state(self) -> GameState:
        """
        Return a consistent, read-only snapshot for renderers.
        """
        with self._lock:
            return GameState(
                tick=self.tick,
                snake=list(self.snake.positions),
                food=self.food,
                grid_size=self.grid_size,
                run_state=self.run_state,
                score=self.score,
                best_score=self.best_score,
                heading=self.heading,
                speed=self.speed,
            )

    @classmethod
    def from_config(cls, config: GameConfig, **kwargs) -> "SimulationEngine":
        params = config.engine_kwargs()
        params.update(kwargs)
        return cls(**params)


# -------------------------------
# Session Driver
# -------------------------------

def run_session(
    engine: SimulationEngine,
    player,
    max_ticks: int = 3000,
    realtime: bool = False,
    renderer=None,
    render_fps: float = 0,
    recorder=None,
) -> Dict:
    """
    Play one run with an input source until game over or *max_ticks*.

    Each tick polls the player, applies its vector (or release) and then
    advances the engine. In realtime mode ticks are paced by a
    TickScheduler and the renderer runs on its own RenderLoop; otherwise
    ticks run back to back and the renderer (if any) sees every tick.

    Returns:
        A dictionary summarizing the run (game_id, score, best_score, ticks, length).
    """
    from services.game_loop import RenderLoop, TickScheduler

    game_id = str(uuid.uuid4())
    logger.info(f"Session {game_id} started with {player.__class__.__name__}")

    def tick_once():
        state = engine.get_current_state()
        engine.handle_input(player.get_vector(state))
        engine.advance()
        if recorder is not None:
            recorder.record(engine.get_current_state())

    if recorder is not None:
        recorder.record(engine.get_current_state())

    if realtime:
        ticks_left = [max_ticks]

        def scheduled_tick():
            tick_once()
            ticks_left[0] -= 1
            if engine.game_over or ticks_left[0] <= 0:
                scheduler.stop()

        scheduler = TickScheduler(scheduled_tick, engine.ticks_per_sec)
        render_loop = None
        if renderer is not None:
            render_loop = RenderLoop(engine.get_current_state, renderer, render_fps or engine.ticks_per_sec)
            render_loop.start()
        scheduler.start()
        try:
            scheduler.join()
        finally:
            scheduler.stop()
            if render_loop is not None:
                render_loop.stop()
                renderer(engine.get_current_state())
        if scheduler.error is not None:
            raise scheduler.error
    else:
        for _ in range(max_ticks):
            tick_once()
            if renderer is not None:
                renderer(engine.get_current_state())
            if engine.game_over:
                break

    state = engine.get_current_state()
    result = {
        "game_id": game_id,
        "score": state.score,
        "best_score": state.best_score,
        "ticks": state.tick,
        "length": len(state.snake),
        "game_over": engine.game_over,
    }
    if recorder is not None:
        result["replay_path"] = recorder.save(game_id, result)
    return result


# -------------------------------
# Main Entry Point
# -------------------------------

def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Neon Snake session driven by a computer player."
    )
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default="seeker",
                        help="Input source steering the snake")
    parser.add_argument("--max_ticks", type=int, default=3000,
                        help="Stop after this many ticks if the snake is still alive")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks at the configured tick rate instead of running flat out")
    parser.add_argument("--render", action="store_true",
                        help="Draw the board in the terminal")
    parser.add_argument("--replay", action="store_true",
                        help="Write a JSON replay to completed_games/")
    parser.add_argument("--no-persist", action="store_true",
                        help="Keep the best score in memory only")
    parser.add_argument("--list-players", action="store_true",
                        help="List the available players and exit")

    args = parser.parse_args()
    if args.list_players:
        for name, description in list_variants().items():
            print(f"{name:10} {description}")
        return

    config = load_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    from data_access import BestScoreStore, InMemoryBestScoreStore
    from services.renderer import TextRenderer
    from services.replay import ReplayRecorder

    store = InMemoryBestScoreStore() if args.no_persist else BestScoreStore(profile=config.profile, background=True)
    rng = random.Random(args.seed)
    engine = SimulationEngine.from_config(config, best_score_store=store, rng=rng)

    player_class = get_player_class(args.player)
    if player_class is RandomPlayer:
        player = RandomPlayer(rng=random.Random(args.seed))
    else:
        player = player_class()

    try:
        result = run_session(
            engine,
            player,
            max_ticks=args.max_ticks,
            realtime=args.realtime,
            renderer=TextRenderer() if args.render else None,
            render_fps=config.render_fps,
            recorder=ReplayRecorder() if args.replay else None,
        )
    finally:
        store.close()

    print("\nSession Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
