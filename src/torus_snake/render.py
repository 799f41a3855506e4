"""Headless screen mapping for the rendering collaborator.

Grid cells map to a square window centred on the origin, with ``y``
pointing up. Everything here is a pure function of the current state and
window size, so it is recomputed per frame and follows window resizes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from torus_snake.arena import Position
    from torus_snake.engine import GameEngine


@dataclass(frozen=True)
class Size:
    """Entity size in tile units."""

    width: float
    height: float


HEAD_SIZE = Size(0.8, 0.8)
SEGMENT_SIZE = Size(0.5, 0.5)
FOOD_SIZE = Size(0.6, 0.6)


@dataclass(frozen=True)
class Sprite:
    """A positioned, scaled entity in screen space."""

    kind: str
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


def tile_size(window_size: float, arena_size: int) -> float:
    return window_size / arena_size


def to_screen(
    position: Position,
    window_size: float,
    arena_size: int,
) -> tuple[float, float]:
    """Return the screen-space centre of a grid cell."""
    tile = tile_size(window_size, arena_size)
    origin = -window_size / 2 + tile / 2
    return origin + position.x * tile, origin + position.y * tile


def scale(size: Size, window_size: float, arena_size: int) -> tuple[float, float]:
    """Return a tile-unit size in pixels."""
    tile = tile_size(window_size, arena_size)
    return size.width * tile, size.height * tile


def _sprite(
    kind: str,
    position: Position,
    size: Size,
    window_size: float,
    arena_size: int,
) -> Sprite:
    x, y = to_screen(position, window_size, arena_size)
    w, h = scale(size, window_size, arena_size)
    return Sprite(kind, x, y, w, h)


def sprites(engine: GameEngine, window_size: float | None = None) -> list[Sprite]:
    """Lay out head, body and food sprites for the engine's current state."""
    window = window_size if window_size is not None else engine.config.window_size
    arena_size = engine.arena.size
    head, *body = engine.chain.positions()

    out = [_sprite("head", head, HEAD_SIZE, window, arena_size)]
    out.extend(
        _sprite("segment", pos, SEGMENT_SIZE, window, arena_size) for pos in body
    )
    out.extend(
        _sprite("food", pos, FOOD_SIZE, window, arena_size)
        for pos in engine.food.positions
    )
    return out
