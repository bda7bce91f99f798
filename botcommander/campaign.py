"""In-memory campaign progress: which levels are completed and unlocked."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import UnknownLevelError
from .levels import LEVELS
from .scoring import Rating
from .world import LevelDef

logger = logging.getLogger(__name__)


@dataclass
class Campaign:
    levels: tuple[LevelDef, ...] = LEVELS
    completed: set[int] = field(default_factory=set)
    best_ratings: dict[int, Rating] = field(default_factory=dict)

    def _index_of(self, level_id: int) -> int:
        for index, level in enumerate(self.levels):
            if level.id == level_id:
                return index
        raise UnknownLevelError(level_id)

    def is_unlocked(self, level_id: int) -> bool:
        """The first level is always open; later ones need the previous one done."""
        index = self._index_of(level_id)
        return index == 0 or self.levels[index - 1].id in self.completed

    def record(self, level_id: int, rating: Rating):
        """Record a finished run. Only wins complete a level."""
        self._index_of(level_id)
        if rating is Rating.FAILED:
            return
        self.completed.add(level_id)
        previous = self.best_ratings.get(level_id)
        if previous is None or (
            previous is Rating.COMPLETE and rating is Rating.PERFECT
        ):
            self.best_ratings[level_id] = rating
        logger.info("Level %d completed (%s)", level_id, rating.value)

    def next_level_id(self, level_id: int) -> int:
        """Level after *level_id*, wrapping back to the first after the last."""
        index = self._index_of(level_id)
        return self.levels[(index + 1) % len(self.levels)].id

    @property
    def progress(self) -> tuple[int, int]:
        return (len(self.completed), len(self.levels))
