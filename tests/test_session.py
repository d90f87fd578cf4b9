"""Unit tests for the roller session's clamped command surface."""

import pytest

from wild_dice_config import DIE_SIZES, HISTORY_SIZE
from wild_dice_session import RollSession
from conftest import SequenceRng


class TestCounters:
    @pytest.mark.parametrize("size", DIE_SIZES)
    def test_clamps_at_99(self, size):
        s = RollSession()
        for _ in range(99):
            assert s.change_count(size, 1)
        assert not s.change_count(size, 1)
        assert s.config.counts[size] == 99

    @pytest.mark.parametrize("size", DIE_SIZES)
    def test_clamps_at_zero(self, size):
        s = RollSession()
        assert not s.change_count(size, -1)
        assert s.config.counts[size] == 0

    def test_unknown_size(self):
        with pytest.raises(ValueError):
            RollSession().change_count(20, 1)

    def test_modifier_clamps(self):
        s = RollSession()
        s.change_modifier(150)
        assert s.config.plus_or_minus == 99
        assert not s.change_modifier(1)
        s.change_modifier(-500)
        assert s.config.plus_or_minus == -99


class TestToggles:
    def test_defaults(self):
        s = RollSession()
        assert s.config.include_wild is False
        assert s.config.allow_explode is True

    def test_toggle(self):
        s = RollSession()
        s.toggle_wild()
        s.toggle_explode()
        assert s.config.include_wild is True
        assert s.config.allow_explode is False


class TestRoll:
    def test_no_dice_is_noop(self):
        s = RollSession()
        rng = SequenceRng([])
        assert s.roll(rng) is None
        assert rng.calls == []
        assert len(s.history) == 0
        assert not s.has_result

    def test_roll_records_history(self):
        s = RollSession()
        s.change_count(8, 1)
        s.change_modifier(2)
        out = s.roll(SequenceRng([5]))
        assert out.total == 7
        assert s.has_result
        assert s.outcome is out
        assert s.history.most_recent() == 7

    def test_history_capacity(self):
        s = RollSession()
        s.change_count(4, 1)
        s.toggle_explode()
        for v in [1, 2, 3, 4, 1, 2]:
            s.roll(SequenceRng([v]))
        assert len(s.history) == HISTORY_SIZE
        assert s.history.most_recent() == 2

    def test_crit_flag(self):
        s = RollSession()
        s.change_count(4, 1)
        s.toggle_wild()
        s.roll(SequenceRng([1, 1]))
        assert s.crit
        s.roll(SequenceRng([1, 3]))
        assert not s.crit


class TestReset:
    def test_reset_zeroes_pool_and_result(self):
        s = RollSession()
        for size in DIE_SIZES:
            s.change_count(size, 3)
        s.change_modifier(-5)
        s.toggle_wild()
        s.roll(SequenceRng([1] * 20))
        s.reset()
        assert s.total_dice() == 0
        assert s.config.plus_or_minus == 0
        assert not s.has_result
        assert s.outcome is None
        assert not s.crit
        # Flags and history are kept
        assert s.config.include_wild
        assert len(s.history) == 1
