"""Tick-driven game session composing chain, latch, growth and food."""

from __future__ import annotations

import logging

import numpy as np

from torus_snake.arena import Arena, Direction, Position
from torus_snake.chain import SegmentChain
from torus_snake.clock import FixedTimestep
from torus_snake.collision import detect_eats
from torus_snake.config import SimulationConfig
from torus_snake.food import FoodField, FoodSpawner
from torus_snake.growth import GrowQueue
from torus_snake.latch import DirectionLatch

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-creature simulation on a wrap-around arena.

    Two independent clocks drive the session. Each movement tick runs, in
    order: latch commit, growth, movement, eat detection. Each spawn tick
    places one food item. :meth:`update` feeds elapsed time to both clocks;
    :meth:`movement_tick` and :meth:`spawn_tick` can also be driven directly.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        cfg = config or SimulationConfig()
        self.config = cfg
        self.arena = Arena(cfg.arena_size)
        self.rng = np.random.default_rng(cfg.seed)

        self.chain = SegmentChain.seed(
            Position(cfg.start_x, cfg.start_y),
            cfg.direction,
            length=cfg.initial_length,
            arena_size=cfg.arena_size,
        )
        self.latch = DirectionLatch(cfg.direction)
        self.grow_queue = GrowQueue()
        self.food = FoodField()
        self.spawner = FoodSpawner(
            self.arena, rng=self.rng, max_attempts=cfg.spawn_max_attempts,
        )

        self.movement_clock = FixedTimestep(cfg.movement_step)
        self.spawn_clock = FixedTimestep(cfg.spawn_step)
        self.tick = 0
        self.spawn_ticks = 0

        logger.info(
            "Session started: arena %dx%d, head at %s heading %s.",
            cfg.arena_size, cfg.arena_size, self.chain.head,
            cfg.direction.name,
        )

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a heading change for the next movement tick."""
        return self.latch.request(direction)

    def movement_tick(self) -> list[Position]:
        """Run one movement tick and return the positions eaten on it."""
        direction = self.latch.commit()
        self.grow_queue.drain(self.chain)
        self.chain.advance(direction, self.arena.size)
        eaten = detect_eats(self.chain, self.food, self.grow_queue)
        self.tick += 1
        return eaten

    def spawn_tick(self) -> Position | None:
        """Run one spawn tick and return the new food position, if any."""
        self.spawn_ticks += 1
        return self.spawner.spawn(self.food, self.chain.positions())

    def update(self, elapsed: float) -> tuple[int, int]:
        """Advance both clocks by *elapsed* seconds and run due ticks.

        Returns ``(movement_ticks, spawn_ticks)`` fired by this call.
        """
        moves = self.movement_clock.advance(elapsed)
        spawns = self.spawn_clock.advance(elapsed)
        for _ in range(moves):
            self.movement_tick()
        for _ in range(spawns):
            self.spawn_tick()
        return moves, spawns

    def occupancy(self) -> np.ndarray:
        """Return an ``int8`` occupancy grid indexed ``[y, x]``."""
        return self.arena.paint(self.chain.positions(), self.food.positions)

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "tick": self.tick,
            "spawn_ticks": self.spawn_ticks,
            "arena_size": self.arena.size,
            "heading": self.latch.to_dict(),
            "chain": self.chain.to_dict(),
            "growth": self.grow_queue.to_dict(),
            "food": self.food.to_dict(),
        }
