"""Two-phase heading latch and key-to-heading input mapping."""

from __future__ import annotations

from collections.abc import Iterable

from torus_snake.arena import Direction

# Order in which simultaneously held keys are considered.
_INPUT_PRIORITY: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)

_KEY_NAMES: dict[str, Direction] = {
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
}


class DirectionLatch:
    """Holds the current heading and the one to apply on the next tick.

    Reversals are rejected when requested, so an illegal heading can never
    become ``current`` no matter how many requests arrive between commits.
    """

    def __init__(self, direction: Direction = Direction.LEFT) -> None:
        self.current = direction
        self.pending = direction

    def request(self, direction: Direction) -> bool:
        """Buffer *direction* for the next commit unless it reverses."""
        if direction == self.current.opposite:
            return False
        self.pending = direction
        return True

    def commit(self) -> Direction:
        """Apply the pending heading. Called once per movement tick."""
        self.current = self.pending
        return self.current

    def to_dict(self) -> dict:
        return {
            "current": self.current.name.lower(),
            "pending": self.pending.name.lower(),
        }


def parse_key(key: Direction | str) -> Direction | None:
    """Map a key name (or a Direction) to a heading, ``None`` if unknown."""
    if isinstance(key, Direction):
        return key
    return _KEY_NAMES.get(key.strip().lower())


def handle_input(
    latch: DirectionLatch,
    pressed: Iterable[Direction | str],
) -> Direction | None:
    """Feed the currently held keys into *latch*.

    Keys are tried Up, Right, Down, Left; the first the latch accepts wins.
    Returns the accepted heading, or ``None`` if nothing was accepted.
    """
    held = {d for d in (parse_key(k) for k in pressed) if d is not None}
    for direction in _INPUT_PRIORITY:
        if direction in held and latch.request(direction):
            return direction
    return None
