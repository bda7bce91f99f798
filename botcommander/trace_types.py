"""Trace data types for step-by-step execution replay."""

from __future__ import annotations

from dataclasses import dataclass, field

from .program import AtomicInstruction
from .run_types import RunStats
from .world import RobotState


@dataclass(frozen=True)
class TraceStep:
    """A single step in the execution trace.

    Captures the instruction executed and the RobotState it produced.
    States are immutable, so no copying is needed to keep snapshots apart.
    """

    step_index: int
    instruction: AtomicInstruction
    state: RobotState  # after the instruction


@dataclass(frozen=True)
class ExecutionTrace:
    """Complete trace of a run.

    Contains the initial RobotState (before any instruction) and one
    TraceStep for each instruction that was actually executed.
    """

    steps: list[TraceStep] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)
    initial_state: RobotState | None = None  # before any instruction
