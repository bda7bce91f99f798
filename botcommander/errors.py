"""Exceptions for programming and editor errors.

Crashes and wins are game outcomes carried on RobotState, not exceptions.
"""

from __future__ import annotations


class BotCommanderError(Exception):
    """Base class for all errors raised by this package."""


class EmptyProgramError(BotCommanderError):
    """A run was started with no blocks in the program."""


class ProgramTooLongError(BotCommanderError):
    def __init__(self, block_count: int, max_blocks: int):
        self.block_count = block_count
        self.max_blocks = max_blocks
        super().__init__(
            f"Program uses {block_count} blocks but the level allows {max_blocks}"
        )


class BlockNotAvailableError(BotCommanderError):
    def __init__(self, block_type: str, level_name: str):
        self.block_type = block_type
        self.level_name = level_name
        super().__init__(
            f"Block {block_type} is not available in level '{level_name}'"
        )


class UnknownLevelError(BotCommanderError, KeyError):
    def __init__(self, level_id: int):
        self.level_id = level_id
        super().__init__(f"No level with id {level_id}")

    def __str__(self) -> str:
        return self.args[0]
