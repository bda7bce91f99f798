"""World data types — level definitions and robot state (pure data, no game rules)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .program import Block, BlockType

# ── Geometry ─────────────────────────────────────────────────────


class Direction(IntEnum):
    """Cardinal facing encoded as a 2-bit rotation index."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turned_left(self) -> Direction:
        return Direction((self + 3) % 4)

    def turned_right(self) -> Direction:
        return Direction((self + 1) % 4)

    def reversed(self) -> Direction:
        return Direction((self + 2) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step as (dx, dy); y grows southwards."""
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class EntityKind(str, Enum):
    WALL = "wall"
    COIN = "coin"
    GOAL = "end"


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: EntityKind
    x: int
    y: int


# ── Level definition ─────────────────────────────────────────────


class LevelDef(BaseModel):
    """Static level: square grid, start pose and placed entities.

    Only what the engine needs is checked. A level without a goal is
    accepted; refusing to start such a run is up to the caller.
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: str = ""
    description: str = ""
    grid_size: int = Field(gt=0)
    start_pos: Position
    start_dir: Direction = Direction.EAST
    entities: tuple[Entity, ...] = ()
    optimal_blocks: int = 0  # scoring target only, never checked for legality
    max_blocks: int | None = None
    available_blocks: tuple[BlockType, ...] = tuple(BlockType)
    solution: tuple[Block, ...] = ()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def entity_at(self, kind: EntityKind, x: int, y: int) -> Entity | None:
        """First entity of *kind* on (x, y), in declaration order."""
        for entity in self.entities:
            if entity.type == kind and entity.x == x and entity.y == y:
                return entity
        return None

    def entities_of(self, kind: EntityKind) -> list[Entity]:
        return [e for e in self.entities if e.type == kind]

    @property
    def goal(self) -> Entity | None:
        goals = self.entities_of(EntityKind.GOAL)
        return goals[0] if goals else None

    @property
    def coins(self) -> list[Entity]:
        return self.entities_of(EntityKind.COIN)

    @property
    def walls(self) -> list[Entity]:
        return self.entities_of(EntityKind.WALL)


def load_level(path: str | Path) -> LevelDef:
    """Read a level definition written as JSON (e.g. by a map editor)."""
    return LevelDef.model_validate_json(Path(path).read_text(encoding="utf-8"))


# ── Robot state ──────────────────────────────────────────────────


class RobotStatus(Enum):
    RUNNING = "running"
    CRASHED = "crashed"
    WON = "won"


@dataclass(frozen=True)
class RobotState:
    """One immutable snapshot of the robot; every step yields a new one."""

    x: int
    y: int
    facing: Direction
    crashed: bool = False
    won: bool = False
    collected_coins: frozenset[str] = frozenset()
    logs: tuple[str, ...] = ()

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def status(self) -> RobotStatus:
        if self.crashed:
            return RobotStatus.CRASHED
        if self.won:
            return RobotStatus.WON
        return RobotStatus.RUNNING

    @property
    def is_terminal(self) -> bool:
        return self.crashed or self.won

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "facing": self.facing.name,
            "crashed": self.crashed,
            "won": self.won,
            "collected_coins": sorted(self.collected_coins),
            "logs": list(self.logs),
        }
