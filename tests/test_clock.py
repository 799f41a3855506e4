"""Tests for the fixed-rate clock."""

import pytest

from torus_snake.clock import FixedTimestep


class TestFixedTimestep:
    def test_invalid_step(self):
        with pytest.raises(ValueError, match="positive"):
            FixedTimestep(0)

    def test_negative_elapsed(self):
        with pytest.raises(ValueError, match="negative"):
            FixedTimestep(1.0).advance(-0.5)

    def test_accumulates_until_step(self):
        clock = FixedTimestep(0.5)
        assert clock.advance(0.25) == 0
        assert clock.advance(0.25) == 1
        assert clock.accumulator == 0.0

    def test_long_frame_fires_several(self):
        clock = FixedTimestep(0.5)
        assert clock.advance(1.75) == 3
        assert clock.accumulator == pytest.approx(0.25)
        assert clock.fired == 3

    def test_reset(self):
        clock = FixedTimestep(0.5)
        clock.advance(0.25)
        clock.reset()
        assert clock.advance(0.25) == 0

    def test_reset_clears_fired_count(self):
        clock = FixedTimestep(0.5)
        clock.advance(1.0)
        assert clock.fired == 2
        clock.reset()
        assert clock.fired == 0
        assert clock.accumulator == 0.0
