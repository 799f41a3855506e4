"""Tests for the arena module."""

import numpy as np
import pytest

from torus_snake.arena import Arena, CellType, Direction, Position, step
from torus_snake.chain import SegmentChain


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.DOWN.opposite == Direction.UP
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.RIGHT.opposite == Direction.LEFT

    def test_up_increases_y(self):
        assert step(Position(3, 3), Direction.UP, 10) == Position(3, 4)
        assert step(Position(3, 3), Direction.DOWN, 10) == Position(3, 2)


class TestStep:
    def test_left_wraps_from_zero(self):
        assert step(Position(0, 12), Direction.LEFT, 25) == Position(24, 12)

    def test_right_wraps_from_edge(self):
        assert step(Position(24, 12), Direction.RIGHT, 25) == Position(0, 12)

    def test_chain_advance_uses_step(self):
        chain = SegmentChain(Position(0, 0))
        chain.advance(Direction.DOWN, 7)
        assert chain.head == step(Position(0, 0), Direction.DOWN, 7)

    def test_vertical_wrap(self):
        assert step(Position(5, 0), Direction.DOWN, 25) == Position(5, 24)
        assert step(Position(5, 24), Direction.UP, 25) == Position(5, 0)

    def test_components_stay_in_range(self):
        size = 4
        for x in range(size):
            for y in range(size):
                for d in Direction:
                    p = step(Position(x, y), d, size)
                    assert 0 <= p.x < size
                    assert 0 <= p.y < size

    def test_position_equality_and_hash(self):
        assert Position(1, 2) == Position(1, 2)
        assert Position(1, 2) != Position(2, 1)
        assert len({Position(1, 2), Position(1, 2)}) == 1


class TestArena:
    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            Arena(0)

    def test_contains(self):
        arena = Arena(5)
        assert arena.contains(Position(0, 0))
        assert arena.contains(Position(4, 4))
        assert not arena.contains(Position(5, 0))
        assert not arena.contains(Position(0, -1))

    def test_wrap(self):
        arena = Arena(5)
        assert arena.wrap(-1, 0) == Position(4, 0)
        assert arena.wrap(5, 7) == Position(0, 2)

    def test_random_position_in_bounds(self):
        arena = Arena(6)
        rng = np.random.default_rng(0)
        for _ in range(200):
            assert arena.contains(arena.random_position(rng))

    def test_paint(self):
        arena = Arena(5)
        cells = arena.paint(
            [Position(1, 2), Position(2, 2)],
            [Position(4, 0), Position(2, 2)],
        )
        assert cells.shape == (5, 5)
        assert cells.dtype == np.int8
        assert cells[2, 1] == CellType.SEGMENT
        assert cells[2, 2] == CellType.SEGMENT  # segment wins over food
        assert cells[0, 4] == CellType.FOOD
        assert int((cells == CellType.EMPTY).sum()) == 22
