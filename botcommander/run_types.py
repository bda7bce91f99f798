"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants


class RunOutcome(Enum):
    """How a playback ended."""

    WON = "won"
    CRASHED = "crashed"
    EXHAUSTED = "exhausted"  # trace ran out with the robot still running
    STEP_LIMIT = "step_limit"


@dataclass(frozen=True)
class RunConfig:
    """Groups playback configuration."""

    max_steps: int = constants.DEFAULT_MAX_STEPS
    tick_delay: float = constants.DEFAULT_TICK_DELAY
    verbose: bool = False


@dataclass
class RunStats:
    """Returned run metrics from execute_program."""

    block_count: int = 0
    trace_length: int = 0
    steps: int = 0
    coins_collected: int = 0
    outcome: RunOutcome | None = None

    def report(self) -> str:
        outcome = self.outcome.value if self.outcome else "-"
        lines = [
            "═══ Run Statistics ═══",
            f"  {'Blocks':<16} {self.block_count:>6}",
            f"  {'Trace length':<16} {self.trace_length:>6}",
            f"  {'Steps executed':<16} {self.steps:>6}",
            f"  {'Coins collected':<16} {self.coins_collected:>6}",
            f"  {'Outcome':<16} {outcome:>6}",
        ]
        return "\n".join(lines)
