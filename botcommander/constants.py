"""Named constants — log lines, editor bounds and playback defaults."""

from __future__ import annotations

LOG_BANNER = "System Online. Awaiting command."
LOG_TURNED_LEFT = "Turned Left"
LOG_TURNED_RIGHT = "Turned Right"
LOG_MOVED_TEMPLATE = "Moved to ({x}, {y})"
LOG_REVERSED_TEMPLATE = "Reversed to ({x}, {y})"
LOG_COLLISION = "CRITICAL FAILURE: Collision detected."
LOG_COIN_COLLECTED = "Coin Collected!"
LOG_TARGET_REACHED = "TARGET REACHED. SEQUENCE COMPLETE."

REPEAT_MIN_COUNT = 2
REPEAT_MAX_COUNT = 10
REPEAT_DEFAULT_COUNT = 2

DEFAULT_TICK_DELAY = 0.5  # seconds per step
DEFAULT_MAX_STEPS = 1000

GRID_EMPTY = "."
GRID_WALL = "#"
GRID_COIN = "o"
GRID_GOAL = "G"
GRID_CRASHED = "X"
