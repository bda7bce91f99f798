"""Block-count scoring and palette capacity rules."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Sequence

from .compiler import count_blocks
from .errors import BlockNotAvailableError, ProgramTooLongError
from .program import Block, Repeat
from .world import LevelDef, RobotState


class Rating(Enum):
    PERFECT = "perfect"  # won within the level's optimal block count
    COMPLETE = "complete"
    FAILED = "failed"


def rate_run(
    program: Sequence[Block], level: LevelDef, final_state: RobotState
) -> Rating:
    if not final_state.won:
        return Rating.FAILED
    if count_blocks(program) <= level.optimal_blocks:
        return Rating.PERFECT
    return Rating.COMPLETE


def _walk(program: Sequence[Block]) -> Iterator[Block]:
    pending = list(reversed(program))
    while pending:
        block = pending.pop()
        yield block
        if isinstance(block, Repeat):
            pending.extend(reversed(block.body))


def check_capacity(program: Sequence[Block], level: LevelDef):
    """Raise if *program* breaks the level's palette rules.

    Raises:
        ProgramTooLongError: More top-level blocks than ``level.max_blocks``.
        BlockNotAvailableError: A block type (at any depth) missing from
            ``level.available_blocks``.
    """
    block_count = count_blocks(program)
    if level.max_blocks is not None and block_count > level.max_blocks:
        raise ProgramTooLongError(block_count, level.max_blocks)
    for block in _walk(program):
        if block.block_type not in level.available_blocks:
            raise BlockNotAvailableError(block.block_type.value, level.name)
