"""Food placement by rejection sampling."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from torus_snake.arena import Arena, Position

logger = logging.getLogger(__name__)


class FoodField:
    """The food items currently on the arena, in spawn order.

    There is no cap: uneaten items accumulate.
    """

    def __init__(self, positions: Iterable[Position] = ()) -> None:
        self.positions: list[Position] = list(positions)

    def add(self, position: Position) -> None:
        self.positions.append(position)

    def remove(self, position: Position) -> bool:
        """Remove the item at *position*. Returns True if one was removed."""
        if position in self.positions:
            self.positions.remove(position)
            return True
        return False

    def __contains__(self, position: object) -> bool:
        return position in self.positions

    def __iter__(self) -> Iterator[Position]:
        # Iterate a copy so callers may remove while walking.
        return iter(list(self.positions))

    def __len__(self) -> int:
        return len(self.positions)

    def to_dict(self) -> dict:
        return {"positions": [p.to_list() for p in self.positions]}


class FoodSpawner:
    """Places food on cells free of both food and body segments.

    Draws uniform random cells until one is free. ``max_attempts`` bounds
    the number of draws; ``None`` keeps sampling for as long as a free
    cell exists. Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        arena: Arena,
        rng: np.random.Generator | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(
        self,
        food: FoodField,
        occupied: Iterable[Position],
    ) -> Position | None:
        """Spawn one food item and return its position.

        Returns ``None`` when the arena is full or the attempt budget ran
        out.
        """
        blocked = set(occupied)
        blocked.update(food.positions)
        if len(blocked) >= self.arena.cell_count:
            logger.warning("No free cells available for food spawning.")
            return None

        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            attempts += 1
            candidate = self.arena.random_position(self.rng)
            if candidate not in blocked:
                food.add(candidate)
                logger.debug(
                    "Spawned food at %s after %d draw(s).", candidate, attempts,
                )
                return candidate

        logger.warning(
            "Gave up spawning food after %d draws (%d of %d cells occupied).",
            attempts, len(blocked), self.arena.cell_count,
        )
        return None
