"""
Game constants for Neon Snake.
"""

# Run states
IDLE = "IDLE"
RUNNING = "RUNNING"
PAUSED = "PAUSED"
GAME_OVER = "GAME_OVER"

# Board and timing
GRID_SIZE = 50
TICKS_PER_SEC = 30
RENDER_FPS = 60

# Speed is measured in logical cells per second
DEFAULT_SPEED = 6.0
SPEED_STEP = 2.0
MIN_SPEED = 2.0
MAX_SPEED = 12.0

# Distances in logical cells
FOOD_CLEARANCE = 0.8
EAT_DISTANCE = 0.5
SELF_COLLISION_DISTANCE = 0.3
HEAD_EXEMPT_SEGMENTS = 3

INITIAL_LENGTH = 4
INPUT_EPSILON = 0.01
FOOD_PLACEMENT_ATTEMPTS = 1000

# 0 keeps the heading at its continuous angle
CONTINUOUS_TURNING = 0
