"""Simulation configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from torus_snake.arena import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Arena, spawn and clock settings for one game session.

    Supports JSON serialization for reproducibility.
    """

    # Arena
    arena_size: int = 25

    # Creature
    start_x: int = 12
    start_y: int = 12
    start_direction: str = "left"
    initial_length: int = 3

    # Clocks (seconds per tick)
    movement_step: float = 0.08
    spawn_step: float = 3.0

    # Food
    seed: int | None = None
    spawn_max_attempts: int | None = None

    # Rendering
    window_size: float = 600.0

    def __post_init__(self) -> None:
        if self.arena_size < 1:
            raise ValueError("arena_size must be at least 1.")
        if not (
            0 <= self.start_x < self.arena_size
            and 0 <= self.start_y < self.arena_size
        ):
            raise ValueError("start position must lie inside the arena.")
        if self.start_direction.lower() not in _DIRECTIONS:
            raise ValueError(
                f"Unknown start_direction {self.start_direction!r}; "
                f"expected one of {sorted(_DIRECTIONS)}."
            )
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.movement_step <= 0 or self.spawn_step <= 0:
            raise ValueError("movement_step and spawn_step must be positive.")
        if self.spawn_max_attempts is not None and self.spawn_max_attempts < 1:
            raise ValueError("spawn_max_attempts must be at least 1.")
        if self.window_size <= 0:
            raise ValueError("window_size must be positive.")

    @property
    def direction(self) -> Direction:
        return _DIRECTIONS[self.start_direction.lower()]

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)


_DIRECTIONS: dict[str, Direction] = {d.name.lower(): d for d in Direction}
