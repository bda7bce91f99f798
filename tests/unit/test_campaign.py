"""Tests for the built-in levels and in-memory campaign progress."""

import pytest

from botcommander.campaign import Campaign
from botcommander.errors import UnknownLevelError
from botcommander.levels import LEVELS, get_level
from botcommander.run import execute_program
from botcommander.run_types import RunOutcome
from botcommander.scoring import Rating


class TestLevels:
    @pytest.mark.parametrize("level", LEVELS, ids=lambda lv: lv.name)
    def test_reference_solution_wins(self, level):
        final, trace = execute_program(level.solution, level)
        assert final.won
        assert not final.crashed
        assert trace.stats.outcome is RunOutcome.WON

    @pytest.mark.parametrize("level", LEVELS, ids=lambda lv: lv.name)
    def test_entity_ids_are_unique(self, level):
        ids = [e.id for e in level.entities]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("level", LEVELS, ids=lambda lv: lv.name)
    def test_each_level_has_a_goal(self, level):
        assert level.goal is not None

    def test_loop_level_collects_both_coins(self):
        level = get_level(3)
        final, _ = execute_program(level.solution, level)
        assert final.collected_coins == {"c1", "c2"}

    def test_get_level(self):
        assert get_level(2).name == "The Corner"

    def test_unknown_level(self):
        with pytest.raises(UnknownLevelError):
            get_level(99)

    def test_unknown_level_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_level(0)


class TestCampaign:
    def test_first_level_unlocked_others_locked(self):
        campaign = Campaign()
        assert campaign.is_unlocked(1)
        assert not campaign.is_unlocked(2)
        assert not campaign.is_unlocked(3)

    def test_completing_a_level_unlocks_the_next(self):
        campaign = Campaign()
        campaign.record(1, Rating.COMPLETE)
        assert campaign.is_unlocked(2)
        assert not campaign.is_unlocked(3)

    def test_failed_run_does_not_complete(self):
        campaign = Campaign()
        campaign.record(1, Rating.FAILED)
        assert 1 not in campaign.completed
        assert campaign.progress == (0, 3)

    def test_best_rating_is_kept(self):
        campaign = Campaign()
        campaign.record(1, Rating.PERFECT)
        campaign.record(1, Rating.COMPLETE)
        assert campaign.best_ratings[1] is Rating.PERFECT

    def test_rating_upgrades_to_perfect(self):
        campaign = Campaign()
        campaign.record(2, Rating.COMPLETE)
        campaign.record(2, Rating.PERFECT)
        assert campaign.best_ratings[2] is Rating.PERFECT

    def test_next_level_wraps_around(self):
        campaign = Campaign()
        assert campaign.next_level_id(1) == 2
        assert campaign.next_level_id(3) == 1

    def test_unknown_level_raises(self):
        campaign = Campaign()
        with pytest.raises(UnknownLevelError):
            campaign.is_unlocked(42)
        with pytest.raises(UnknownLevelError):
            campaign.record(42, Rating.PERFECT)

    def test_progress(self):
        campaign = Campaign()
        campaign.record(1, Rating.PERFECT)
        campaign.record(2, Rating.PERFECT)
        assert campaign.progress == (2, 3)
