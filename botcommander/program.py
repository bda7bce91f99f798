"""Program model — author-time blocks and the atomic instructions they compile to."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from . import constants


class BlockType(str, Enum):
    MOVE = "MOVE"
    MOVE_BACK = "MOVE_BACK"
    TURN_LEFT = "TURN_LEFT"
    TURN_RIGHT = "TURN_RIGHT"
    REPEAT = "REPEAT"


ATOMIC_BLOCK_TYPES: frozenset[BlockType] = frozenset(
    {
        BlockType.MOVE,
        BlockType.MOVE_BACK,
        BlockType.TURN_LEFT,
        BlockType.TURN_RIGHT,
    }
)


class _BlockBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def block_type(self) -> BlockType:
        return BlockType(self.type)

    def __str__(self) -> str:
        return self.type.lower()


class Move(_BlockBase):
    """Advance one cell in the facing direction."""

    type: Literal["MOVE"] = "MOVE"


class MoveBack(_BlockBase):
    """Retreat one cell against the facing direction, keeping the facing."""

    type: Literal["MOVE_BACK"] = "MOVE_BACK"


class TurnLeft(_BlockBase):
    type: Literal["TURN_LEFT"] = "TURN_LEFT"


class TurnRight(_BlockBase):
    type: Literal["TURN_RIGHT"] = "TURN_RIGHT"


class Repeat(_BlockBase):
    """Run ``body`` ``count`` times in a row.

    The editor always creates a repeat with a one-block body, but any body
    length (including zero) and any nesting depth is accepted here.
    """

    type: Literal["REPEAT"] = "REPEAT"
    count: int = Field(
        default=constants.REPEAT_DEFAULT_COUNT, ge=0, le=constants.REPEAT_MAX_COUNT
    )
    body: tuple[Block, ...] = ()

    def __str__(self) -> str:
        inner = ", ".join(str(child) for child in self.body)
        return f"repeat {self.count} [{inner}]"


AtomicInstruction = Annotated[
    Union[Move, MoveBack, TurnLeft, TurnRight], Field(discriminator="type")
]
Block = Annotated[
    Union[Move, MoveBack, TurnLeft, TurnRight, Repeat], Field(discriminator="type")
]

Repeat.model_rebuild()

_ATOMIC_CLASSES: dict[BlockType, type[_BlockBase]] = {
    BlockType.MOVE: Move,
    BlockType.MOVE_BACK: MoveBack,
    BlockType.TURN_LEFT: TurnLeft,
    BlockType.TURN_RIGHT: TurnRight,
}

_PROGRAM_ADAPTER = TypeAdapter(list[Block])


def atomic(block_type: BlockType) -> AtomicInstruction:
    """Build the payload-free block for *block_type*."""
    if block_type not in _ATOMIC_CLASSES:
        raise ValueError(f"{block_type} carries a payload; build it directly")
    return _ATOMIC_CLASSES[block_type]()


def clamp_repeat_count(count: int) -> int:
    """Clamp a count edited in the palette to the allowed repeat range."""
    return max(constants.REPEAT_MIN_COUNT, min(constants.REPEAT_MAX_COUNT, count))


def make_repeat(
    body_type: BlockType = BlockType.MOVE,
    count: int = constants.REPEAT_DEFAULT_COUNT,
) -> Repeat:
    """Create a repeat block the way the palette does: one body block, clamped count."""
    return Repeat(count=clamp_repeat_count(count), body=(atomic(body_type),))


def parse_program(json_text: str | bytes) -> list[Block]:
    """Validate a JSON array of blocks into a program."""
    return _PROGRAM_ADAPTER.validate_json(json_text)


def program_to_json(program: list[Block]) -> str:
    return _PROGRAM_ADAPTER.dump_json(program, indent=2).decode("utf-8")
