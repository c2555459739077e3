"""Tests for RoundTiming validation."""

import pytest

from matchie.game.interfaces import RoundTiming


class TestRoundTiming:
    def test_defaults(self) -> None:
        timing = RoundTiming()
        assert timing.match_delay_ms == 500
        assert timing.mismatch_delay_ms == 1000
        assert timing.tick_interval_ms == 1000

    def test_settle_delay_by_outcome(self) -> None:
        timing = RoundTiming()
        assert timing.settle_delay(True) < timing.settle_delay(False)

    def test_match_must_be_faster_than_mismatch(self) -> None:
        with pytest.raises(ValueError):
            RoundTiming(match_delay_ms=1000, mismatch_delay_ms=1000)

    def test_values_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            RoundTiming(tick_interval_ms=0)

    def test_repr(self) -> None:
        assert repr(RoundTiming()) == "RoundTiming(match=500ms, mismatch=1000ms, tick=1000ms)"
