"""Built-in campaign levels."""

from __future__ import annotations

from .errors import UnknownLevelError
from .program import BlockType, Move, Repeat, TurnLeft, TurnRight
from .world import Direction, Entity, EntityKind, LevelDef, Position

LEVELS: tuple[LevelDef, ...] = (
    LevelDef(
        id=1,
        name="Initiation",
        description="Program the robot to reach the Data Terminal.",
        grid_size=5,
        start_pos=Position(x=0, y=2),
        start_dir=Direction.EAST,
        entities=(
            Entity(id="e1", type=EntityKind.GOAL, x=4, y=2),
            Entity(id="w1", type=EntityKind.WALL, x=2, y=0),
            Entity(id="w2", type=EntityKind.WALL, x=2, y=4),
        ),
        optimal_blocks=4,
        max_blocks=5,
        available_blocks=(BlockType.MOVE, BlockType.MOVE_BACK),
        solution=(Move(), Move(), Move(), Move()),
    ),
    LevelDef(
        id=2,
        name="The Corner",
        description="Use Turn commands to navigate around the firewall.",
        grid_size=5,
        start_pos=Position(x=1, y=4),
        start_dir=Direction.NORTH,
        entities=(
            Entity(id="e1", type=EntityKind.GOAL, x=3, y=1),
            Entity(id="w1", type=EntityKind.WALL, x=1, y=2),
            Entity(id="w2", type=EntityKind.WALL, x=2, y=2),
            Entity(id="w3", type=EntityKind.WALL, x=3, y=2),
        ),
        optimal_blocks=10,
        max_blocks=12,
        available_blocks=(
            BlockType.MOVE,
            BlockType.TURN_RIGHT,
            BlockType.TURN_LEFT,
            BlockType.MOVE_BACK,
        ),
        solution=(
            Move(),
            TurnRight(),
            Move(),
            Move(),
            Move(),
            TurnLeft(),
            Move(),
            Move(),
            TurnLeft(),
            Move(),
        ),
    ),
    LevelDef(
        id=3,
        name="Loop Logic",
        description="Use the Repeat block to traverse long distances efficiently.",
        grid_size=6,
        start_pos=Position(x=0, y=0),
        start_dir=Direction.EAST,
        entities=(
            Entity(id="c1", type=EntityKind.COIN, x=2, y=0),
            Entity(id="c2", type=EntityKind.COIN, x=4, y=0),
            Entity(id="e1", type=EntityKind.GOAL, x=5, y=5),
            Entity(id="w1", type=EntityKind.WALL, x=5, y=0),
            Entity(id="w2", type=EntityKind.WALL, x=5, y=1),
            Entity(id="w3", type=EntityKind.WALL, x=5, y=2),
        ),
        optimal_blocks=5,
        max_blocks=6,
        available_blocks=(BlockType.MOVE, BlockType.TURN_RIGHT, BlockType.REPEAT),
        solution=(
            Repeat(count=4, body=(Move(),)),
            TurnRight(),
            Repeat(count=5, body=(Move(),)),
            # three rights make a left; TURN_LEFT is not in this palette
            Repeat(count=3, body=(TurnRight(),)),
            Move(),
        ),
    ),
)


def get_level(level_id: int) -> LevelDef:
    for level in LEVELS:
        if level.id == level_id:
            return level
    raise UnknownLevelError(level_id)
