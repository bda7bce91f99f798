"""Step executor — applies one atomic instruction to a robot state."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable

from . import constants
from .program import AtomicInstruction, BlockType
from .world import Direction, EntityKind, LevelDef, RobotState

logger = logging.getLogger(__name__)


def initial_state(level: LevelDef) -> RobotState:
    """Canonical start state for *level*: start pose, no coins, banner log."""
    return RobotState(
        x=level.start_pos.x,
        y=level.start_pos.y,
        facing=level.start_dir,
        logs=(constants.LOG_BANNER,),
    )


def _log(state: RobotState, message: str, **changes: Any) -> RobotState:
    """Return a copy of *state* with *message* appended and *changes* applied."""
    return dataclasses.replace(state, logs=state.logs + (message,), **changes)


# ── Instruction handlers ─────────────────────────────────────────


def _turn_left(state: RobotState, level: LevelDef) -> RobotState:
    return _log(state, constants.LOG_TURNED_LEFT, facing=state.facing.turned_left())


def _turn_right(state: RobotState, level: LevelDef) -> RobotState:
    return _log(state, constants.LOG_TURNED_RIGHT, facing=state.facing.turned_right())


def _move(
    state: RobotState, level: LevelDef, heading: Direction, template: str
) -> RobotState:
    dx, dy = heading.delta
    nx, ny = state.x + dx, state.y + dy

    if not level.in_bounds(nx, ny):
        logger.debug(
            "Move to (%d, %d) leaves the %dx%d grid",
            nx,
            ny,
            level.grid_size,
            level.grid_size,
        )
        return _log(state, constants.LOG_COLLISION, crashed=True)
    wall = level.entity_at(EntityKind.WALL, nx, ny)
    if wall is not None:
        logger.debug("Move to (%d, %d) hits wall %s", nx, ny, wall.id)
        return _log(state, constants.LOG_COLLISION, crashed=True)

    return _log(state, template.format(x=nx, y=ny), x=nx, y=ny)


def _advance(state: RobotState, level: LevelDef) -> RobotState:
    return _move(state, level, state.facing, constants.LOG_MOVED_TEMPLATE)


def _retreat(state: RobotState, level: LevelDef) -> RobotState:
    # Backs up without turning around
    return _move(
        state, level, state.facing.reversed(), constants.LOG_REVERSED_TEMPLATE
    )


_HANDLERS: dict[BlockType, Callable[[RobotState, LevelDef], RobotState]] = {
    BlockType.MOVE: _advance,
    BlockType.MOVE_BACK: _retreat,
    BlockType.TURN_LEFT: _turn_left,
    BlockType.TURN_RIGHT: _turn_right,
}


# ── Cell interactions ────────────────────────────────────────────


def _collect_coin(state: RobotState, level: LevelDef) -> RobotState:
    coin = level.entity_at(EntityKind.COIN, state.x, state.y)
    if coin is None or coin.id in state.collected_coins:
        return state
    return _log(
        state,
        constants.LOG_COIN_COLLECTED,
        collected_coins=state.collected_coins | {coin.id},
    )


def _check_goal(state: RobotState, level: LevelDef) -> RobotState:
    if level.entity_at(EntityKind.GOAL, state.x, state.y) is None:
        return state
    return _log(state, constants.LOG_TARGET_REACHED, won=True)


def step(
    state: RobotState, instruction: AtomicInstruction, level: LevelDef
) -> RobotState:
    """Apply one atomic instruction and return the next state.

    A terminal state (crashed or won) is returned unchanged. An illegal
    move sets ``crashed`` and skips the coin and goal checks; otherwise
    the coin check and then the goal check run against the resulting
    position, after turns as well as moves.

    Args:
        state: Current robot state. Never modified.
        instruction: An atomic instruction from a compiled trace.
        level: The level being played.

    Returns:
        The new robot state.

    Raises:
        TypeError: If *instruction* is a repeat block (compile it first).
    """
    if state.is_terminal:
        return state

    handler = _HANDLERS.get(BlockType(instruction.type))
    if handler is None:
        raise TypeError(
            f"'{instruction}' is not an atomic instruction; compile the program first"
        )

    next_state = handler(state, level)
    if next_state.crashed:
        return next_state

    next_state = _collect_coin(next_state, level)
    return _check_goal(next_state, level)
