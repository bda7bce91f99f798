"""Tests for block-count rating and palette capacity checks."""

import sys

import pytest

from botcommander.errors import BlockNotAvailableError, ProgramTooLongError
from botcommander.executor import initial_state
from botcommander.levels import get_level
from botcommander.program import BlockType, Move, Repeat, TurnLeft, TurnRight
from botcommander.run import execute_program
from botcommander.scoring import Rating, check_capacity, rate_run
from botcommander.world import Direction, LevelDef, Position


class TestRateRun:
    def test_solution_within_optimal_is_perfect(self):
        level = get_level(3)
        final, _ = execute_program(level.solution, level)
        assert rate_run(level.solution, level, final) is Rating.PERFECT

    def test_win_over_optimal_is_complete(self):
        level = get_level(1)
        program = [Move(), Move(), Move(), TurnLeft(), TurnRight(), Move()]
        final, _ = execute_program(program, level)
        assert final.won
        assert rate_run(program, level, final) is Rating.COMPLETE

    def test_no_win_is_failed(self):
        level = get_level(1)
        program = [Move()]
        final, _ = execute_program(program, level)
        assert rate_run(program, level, final) is Rating.FAILED

    def test_initial_state_is_failed(self):
        level = get_level(1)
        assert rate_run([], level, initial_state(level)) is Rating.FAILED


class TestCheckCapacity:
    def test_reference_solutions_fit(self):
        for level_id in (1, 2, 3):
            level = get_level(level_id)
            check_capacity(level.solution, level)

    def test_too_many_blocks(self):
        level = get_level(1)
        with pytest.raises(ProgramTooLongError) as excinfo:
            check_capacity([Move()] * 6, level)
        assert excinfo.value.block_count == 6
        assert excinfo.value.max_blocks == 5

    def test_unavailable_top_level_block(self):
        level = get_level(3)
        with pytest.raises(BlockNotAvailableError) as excinfo:
            check_capacity([TurnLeft()], level)
        assert excinfo.value.block_type == "TURN_LEFT"

    def test_unavailable_block_inside_repeat(self):
        level = get_level(3)
        with pytest.raises(BlockNotAvailableError):
            check_capacity([Repeat(count=2, body=(TurnLeft(),))], level)

    def test_deeply_nested_unavailable_block(self):
        block = TurnLeft()
        for _ in range(sys.getrecursionlimit() + 500):
            block = Repeat(count=1, body=(block,))
        with pytest.raises(BlockNotAvailableError):
            check_capacity([block], get_level(3))

    def test_no_limit_when_max_blocks_unset(self):
        level = LevelDef(
            grid_size=3,
            start_pos=Position(x=0, y=0),
            start_dir=Direction.EAST,
            available_blocks=(BlockType.MOVE,),
        )
        check_capacity([Move()] * 50, level)
