"""Composable API functions for the engine pipelines.

Each function corresponds to a CLI workflow (--trace-only, --grid-only)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from typing import Sequence

from . import constants
from .compiler import compile_program, count_instructions
from .program import AtomicInstruction, Block, parse_program
from .world import Direction, EntityKind, LevelDef, RobotState

logger = logging.getLogger(__name__)

_ROBOT_GLYPHS: dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}

_ENTITY_GLYPHS: dict[EntityKind, str] = {
    EntityKind.WALL: constants.GRID_WALL,
    EntityKind.COIN: constants.GRID_COIN,
    EntityKind.GOAL: constants.GRID_GOAL,
}


def compile_source(json_text: str | bytes) -> list[AtomicInstruction]:
    """Parse a JSON program and compile it to a flat trace.

    Args:
        json_text: A JSON array of blocks.

    Returns:
        A list of atomic instructions.
    """
    program = parse_program(json_text)
    logger.info("Compiling program of %d top-level blocks", len(program))
    return compile_program(program)


def dump_trace(program: Sequence[Block]) -> str:
    """Compile *program* and return one numbered instruction per line."""
    return "\n".join(
        f"  {index:>3}  {inst}" for index, inst in enumerate(compile_program(program))
    )


def instruction_stats(json_text: str | bytes) -> dict[str, int]:
    """Block type frequencies of the compiled form of a JSON program."""
    return count_instructions(compile_source(json_text))


def dump_grid(level: LevelDef, state: RobotState | None = None) -> str:
    """Render the level as ASCII, one row per line, with the robot if given.

    Collected coins are not drawn. A crashed robot shows as ``X``.
    """
    rows = [[constants.GRID_EMPTY] * level.grid_size for _ in range(level.grid_size)]
    collected = state.collected_coins if state else frozenset()
    for entity in level.entities:
        if not level.in_bounds(entity.x, entity.y):
            continue
        if entity.type == EntityKind.COIN and entity.id in collected:
            continue
        if rows[entity.y][entity.x] == constants.GRID_EMPTY:
            rows[entity.y][entity.x] = _ENTITY_GLYPHS[entity.type]
    if state is not None and level.in_bounds(state.x, state.y):
        if state.crashed:
            rows[state.y][state.x] = constants.GRID_CRASHED
        else:
            rows[state.y][state.x] = _ROBOT_GLYPHS[state.facing]
    return "\n".join(" ".join(row) for row in rows)
