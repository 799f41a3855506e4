"""Torus Snake: tick-driven simulation core."""

from torus_snake.arena import Arena, CellType, Direction, Position, step
from torus_snake.chain import ChainError, Segment, SegmentChain
from torus_snake.clock import FixedTimestep
from torus_snake.collision import detect_eats
from torus_snake.config import SimulationConfig
from torus_snake.engine import GameEngine
from torus_snake.food import FoodField, FoodSpawner
from torus_snake.growth import GrowQueue, GrowRequest
from torus_snake.latch import DirectionLatch, handle_input

__all__ = [
    "Arena",
    "CellType",
    "ChainError",
    "Direction",
    "DirectionLatch",
    "FixedTimestep",
    "FoodField",
    "FoodSpawner",
    "GameEngine",
    "GrowQueue",
    "GrowRequest",
    "Position",
    "Segment",
    "SegmentChain",
    "SimulationConfig",
    "detect_eats",
    "handle_input",
    "step",
]
