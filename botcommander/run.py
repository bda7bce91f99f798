"""Orchestrator — compiles a program once and feeds the executor tick by tick."""

from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from .compiler import compile_program, count_blocks
from .errors import EmptyProgramError
from .executor import initial_state, step
from .program import AtomicInstruction, Block
from .run_types import RunConfig, RunOutcome, RunStats
from .trace_types import ExecutionTrace, TraceStep
from .world import LevelDef, RobotState

logger = logging.getLogger(__name__)


class Playback:
    """Explicit scheduling loop around the pure executor.

    ``start()`` compiles the program and resets the robot; each ``tick()``
    applies exactly one instruction. Whoever owns the clock decides when
    to call ``tick()``; ``run_to_end()`` is the blocking variant that
    sleeps ``config.tick_delay`` between ticks.
    """

    def __init__(
        self,
        program: Sequence[Block],
        level: LevelDef,
        config: RunConfig = RunConfig(),
    ):
        self._program = list(program)
        self._level = level
        self._config = config
        self._trace: list[AtomicInstruction] = []
        self._index = -1
        self._running = False
        self._outcome: RunOutcome | None = None
        self.state: RobotState = initial_state(level)

    @property
    def level(self) -> LevelDef:
        return self._level

    @property
    def trace(self) -> list[AtomicInstruction]:
        return list(self._trace)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def step_index(self) -> int:
        """Index of the next instruction to run; -1 before start / after stop."""
        return self._index

    @property
    def outcome(self) -> RunOutcome | None:
        return self._outcome

    @property
    def next_instruction(self) -> AtomicInstruction | None:
        if not self._running or not 0 <= self._index < len(self._trace):
            return None
        return self._trace[self._index]

    def start(self) -> list[AtomicInstruction]:
        """Compile the program and rewind the robot to the level start."""
        if not self._program:
            raise EmptyProgramError("Add at least one block before running")
        self._trace = compile_program(self._program)
        self.state = initial_state(self._level)
        self._index = 0
        self._running = True
        self._outcome = None
        logger.info(
            "Compiled %d blocks into %d instructions for level %d",
            count_blocks(self._program),
            len(self._trace),
            self._level.id,
        )
        return self.trace

    def stop(self) -> RobotState:
        """Abort the run and reset the robot to its initial state."""
        self._running = False
        self._index = -1
        self._outcome = None
        self.state = initial_state(self._level)
        return self.state

    def tick(self) -> RobotState | None:
        """Run one instruction. Returns the new state, or None if nothing ran."""
        if not self._running:
            return None
        if self._index >= len(self._trace):
            self._finish(RunOutcome.EXHAUSTED)
            return None
        if self._index >= self._config.max_steps:
            self._finish(RunOutcome.STEP_LIMIT)
            return None

        instruction = self._trace[self._index]
        self.state = step(self.state, instruction, self._level)
        logger.debug(
            "step %d: %s -> (%d, %d) %s",
            self._index,
            instruction,
            self.state.x,
            self.state.y,
            self.state.facing.name,
        )
        if self._config.verbose:
            print(f"[step {self._index}] {instruction}  → {self.state.logs[-1]}")
        self._index += 1

        if self.state.crashed:
            self._finish(RunOutcome.CRASHED)
        elif self.state.won:
            self._finish(RunOutcome.WON)
        elif self._index >= len(self._trace):
            self._finish(RunOutcome.EXHAUSTED)
        elif self._index >= self._config.max_steps:
            self._finish(RunOutcome.STEP_LIMIT)
        return self.state

    def run_to_end(self, sleep: Callable[[float], None] = time.sleep) -> RobotState:
        """Start if needed, then tick until the run ends."""
        if not self._running:
            self.start()
        while self._running:
            self.tick()
            if self._running and self._config.tick_delay > 0:
                sleep(self._config.tick_delay)
        return self.state

    def _finish(self, outcome: RunOutcome):
        self._running = False
        self._outcome = outcome
        logger.info(
            "Run on level %d ended: %s after %d steps",
            self._level.id,
            outcome.value,
            self._index,
        )


def execute_program(
    program: Sequence[Block],
    level: LevelDef,
    config: RunConfig = RunConfig(),
) -> tuple[RobotState, ExecutionTrace]:
    """Compile and run a program to completion, recording every step.

    Unlike ``Playback.run_to_end`` this never sleeps; ``tick_delay`` is
    ignored.

    Args:
        program: Top-level blocks to run.
        level: Level to run them on.
        config: Execution configuration (max_steps, verbose).

    Returns:
        Tuple of (final RobotState, ExecutionTrace with per-step snapshots).

    Raises:
        EmptyProgramError: If *program* has no blocks.
    """
    playback = Playback(program, level, config)
    trace = playback.start()
    initial = playback.state
    steps: list[TraceStep] = []

    while playback.is_running:
        instruction = playback.next_instruction
        state = playback.tick()
        if state is None:
            break
        steps.append(
            TraceStep(step_index=len(steps), instruction=instruction, state=state)
        )

    final = playback.state
    stats = RunStats(
        block_count=count_blocks(program),
        trace_length=len(trace),
        steps=len(steps),
        coins_collected=len(final.collected_coins),
        outcome=playback.outcome,
    )

    if config.verbose:
        print()
        print(stats.report())

    return final, ExecutionTrace(steps=steps, stats=stats, initial_state=initial)
