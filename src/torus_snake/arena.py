"""Toroidal arena arithmetic and occupancy snapshots."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) values. ``y`` grows upwards."""

    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy snapshot."""

    EMPTY = 0
    SEGMENT = 1
    FOOD = 2


@dataclass(frozen=True)
class Position:
    """An immutable grid cell."""

    x: int
    y: int

    def to_list(self) -> list[int]:
        return [self.x, self.y]


def step(position: Position, direction: Direction, arena_size: int) -> Position:
    """Move one cell in *direction*, wrapping around the arena edges.

    Python's ``%`` already yields a non-negative remainder for a positive
    modulus, so ``-1`` maps to ``arena_size - 1``.
    """
    dx, dy = direction.value
    return Position(
        (position.x + dx) % arena_size,
        (position.y + dy) % arena_size,
    )


class Arena:
    """A square, wrap-around arena of ``size`` by ``size`` cells."""

    def __init__(self, size: int = 25) -> None:
        if size < 1:
            raise ValueError("Arena size must be at least 1.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def contains(self, position: Position) -> bool:
        """Check whether a position lies within the arena."""
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def wrap(self, x: int, y: int) -> Position:
        """Reduce raw coordinates onto the torus."""
        return Position(x % self.size, y % self.size)

    def random_position(self, rng: np.random.Generator) -> Position:
        """Draw a uniformly random cell."""
        x, y = rng.integers(0, self.size, size=2)
        return Position(int(x), int(y))

    def paint(
        self,
        segments: Iterable[Position],
        foods: Iterable[Position] = (),
    ) -> np.ndarray:
        """Build an ``int8`` occupancy grid indexed ``[y, x]``.

        Segments are painted after food and win on overlap.
        """
        cells = np.zeros((self.size, self.size), dtype=np.int8)
        for pos in foods:
            cells[pos.y, pos.x] = CellType.FOOD
        for pos in segments:
            cells[pos.y, pos.x] = CellType.SEGMENT
        return cells
