"""
Tests for the domain package - geometry, motion control, snake and snapshots.
"""

import math
import sys
import os
from collections import deque

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    MotionController,
    Snake,
    GameState,
    clamp,
    distance,
    wrap_coordinate,
    wrap_position,
    IDLE,
    GAME_OVER,
)
from domain.geometry import toroidal_delta


class TestGeometry:
    """Tests for domain.geometry helpers."""

    def test_wrap_negative(self):
        """wrap(-0.2) on a 50 board is 49.8."""
        assert wrap_coordinate(-0.2, 50) == pytest.approx(49.8)

    def test_wrap_past_edge(self):
        """wrap(50.3) on a 50 board is 0.3."""
        assert wrap_coordinate(50.3, 50) == pytest.approx(0.3)

    @pytest.mark.parametrize("value", [
        -1e-18, -0.2, -50.0, -123.456, 0.0, 12.5, 49.999999, 50.0, 50.3, 1e6, -1e6,
    ])
    def test_wrap_always_in_range(self, value):
        """Wrapped values always land in [0, grid)."""
        wrapped = wrap_coordinate(value, 50)
        assert 0 <= wrapped < 50

    def test_wrap_position_both_axes(self):
        x, y = wrap_position((-0.5, 51.0), 50)
        assert x == pytest.approx(49.5)
        assert y == pytest.approx(1.0)

    def test_clamp(self):
        assert clamp(3.0) == 1.0
        assert clamp(-7.0) == -1.0
        assert clamp(0.25) == 0.25

    def test_clamp_nan_is_zero(self):
        assert clamp(float("nan")) == 0.0

    def test_distance(self):
        assert distance((0, 0), (3, 4)) == pytest.approx(5.0)

    def test_toroidal_delta_takes_short_way(self):
        """Across the seam the short displacement is used."""
        dx, dy = toroidal_delta((49, 25), (1, 25), 50)
        assert dx == pytest.approx(2.0)
        assert dy == pytest.approx(0.0)


class TestMotionController:
    """Tests for MotionController."""

    @pytest.mark.parametrize("raw", [
        (1, 0), (0, -1), (0.3, 0.4), (-0.9, 0.9), (0.02, 0.0), (5, -5), (-3, 0.1),
    ])
    def test_heading_is_unit_length(self, raw):
        """Any non-degenerate input gives a unit heading."""
        heading = MotionController().compute_heading(raw)
        assert math.hypot(*heading) == pytest.approx(1.0, abs=1e-9)

    def test_angle_preserved(self):
        """Continuous mode keeps the input angle."""
        heading = MotionController().compute_heading((0.3, 0.4))
        assert heading == pytest.approx((0.6, 0.8))

    def test_out_of_range_input_clamped(self):
        """Components are clamped to [-1, 1] before normalising."""
        heading = MotionController().compute_heading((3.0, 4.0))
        assert heading == pytest.approx((math.sqrt(0.5), math.sqrt(0.5)))

    def test_tiny_input_is_noop(self):
        """Inputs shorter than 0.01 produce no heading."""
        assert MotionController().compute_heading((0.005, 0.005)) is None
        assert MotionController().compute_heading((0.0, 0.0)) is None

    @pytest.mark.parametrize("prior", [(1.0, 0.0), (0.0, -1.0), (0.6, 0.8)])
    def test_apply_keeps_prior_heading_for_tiny_input(self, prior):
        """apply() returns the previous heading unchanged on a no-op input."""
        controller = MotionController()
        assert controller.apply((0.001, -0.003), prior) == prior
        assert controller.apply((0.001, -0.003), prior) == prior

    def test_nan_input_is_noop(self):
        assert MotionController().compute_heading((float("nan"), 0.0)) is None

    def test_quarter_turn_snapping(self):
        """With 4 directions the heading snaps to the nearest axis."""
        controller = MotionController(turn_directions=4)
        assert controller.compute_heading((0.9, 0.3)) == (1.0, 0.0)
        assert controller.compute_heading((0.3, -0.9)) == (0.0, -1.0)
        assert controller.compute_heading((-0.8, 0.1)) == (-1.0, 0.0)

    def test_eight_direction_snapping(self):
        """With 8 directions diagonals are allowed."""
        controller = MotionController(turn_directions=8)
        heading = controller.compute_heading((0.7, 0.6))
        assert heading == pytest.approx((math.sqrt(0.5), math.sqrt(0.5)))

    def test_invalid_turn_directions(self):
        with pytest.raises(ValueError):
            MotionController(turn_directions=1)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_head_property(self):
        """Snake.head returns the first position (head)."""
        snake = Snake([(5.5, 5), (4.5, 5), (3.5, 5), (2.5, 5)])
        assert snake.head == (5.5, 5)
        assert len(snake) == 4

    def test_snake_positions_is_deque(self):
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        params = dict(
            tick=3,
            snake=[(25.2, 25.0), (25.0, 25.0), (24.0, 25.0), (23.0, 25.0)],
            food=(10.0, 40.0),
            grid_size=50,
            run_state=IDLE,
            score=2,
            best_score=9,
        )
        params.update(overrides)
        return GameState(**params)

    def test_collections_are_tuples(self):
        state = self._state()
        assert isinstance(state.snake, tuple)
        assert state.head == (25.2, 25.0)

    def test_read_only(self):
        state = self._state()
        with pytest.raises(AttributeError):
            state.food = (0, 0)

    def test_to_dict(self):
        data = self._state().to_dict()
        assert data["snake"][0] == [25.2, 25.0]
        assert data["food"] == [10.0, 40.0]
        assert data["best_score"] == 9

    def test_print_board_marks(self):
        """The text board shows head, body and food."""
        board = self._state().print_board(cells=25)
        assert "@" in board
        assert "o" in board
        assert "*" in board
        assert "Score: 2" in board
        assert "Best: 9" in board

    def test_print_board_dimensions(self):
        lines = self._state().print_board(cells=10).split("\n")
        # border + 10 rows + border + status line
        assert len(lines) == 13
        assert all(len(line) == 12 for line in lines[:12])

    def test_repr(self):
        text = repr(self._state(run_state=GAME_OVER))
        assert "tick=3" in text
        assert "GAME_OVER" in text
