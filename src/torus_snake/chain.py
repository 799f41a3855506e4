"""Arena-allocated segment chain and the movement engine."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from torus_snake.arena import Direction, Position, step


class ChainError(RuntimeError):
    """Raised when the chain's structural invariants are broken."""


@dataclass
class Segment:
    """One body cell. ``next`` indexes the segment toward the tail."""

    position: Position
    next: int | None = None


HEAD = 0


class SegmentChain:
    """A singly-linked body stored in a growable list.

    Segments are addressed by stable integer indices; index 0 is always the
    head. Links are indices rather than object references, so a traversal
    can read positions in one pass and write them in another without
    aliasing concerns.
    """

    def __init__(self, head: Position) -> None:
        self.segments: list[Segment] = [Segment(head)]

    @classmethod
    def seed(
        cls,
        head: Position,
        direction: Direction,
        length: int = 3,
        arena_size: int = 25,
    ) -> SegmentChain:
        """Build a chain of *length* cells trailing behind *head*."""
        if length < 1:
            raise ValueError("Chain length must be at least 1.")
        chain = cls(head)
        pos = head
        for _ in range(length - 1):
            pos = step(pos, direction.opposite, arena_size)
            chain.append_tail(pos)
        return chain

    @property
    def head(self) -> Position:
        return self.segments[HEAD].position

    @property
    def tail(self) -> Position:
        return self.segments[self.tail_index()].position

    def tail_index(self) -> int:
        """Return the index of the unique segment with no successor."""
        index = HEAD
        while self.segments[index].next is not None:
            index = self.segments[index].next
        return index

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        """Yield segments from head to tail."""
        index: int | None = HEAD
        while index is not None:
            segment = self.segments[index]
            yield segment
            index = segment.next

    def positions(self) -> list[Position]:
        """Return the body cells ordered head to tail."""
        return [segment.position for segment in self]

    def occupies(self, position: Position) -> bool:
        return any(segment.position == position for segment in self.segments)

    def append_tail(self, position: Position) -> int:
        """Link a new tail segment at *position* and return its index."""
        tail = self.tail_index()
        self.segments.append(Segment(position))
        new_index = len(self.segments) - 1
        self.segments[tail].next = new_index
        return new_index

    def advance(self, direction: Direction, arena_size: int) -> Position:
        """Shift the whole body one cell forward.

        Every segment takes the position its predecessor just vacated.
        Returns the new head position.
        """
        new_head = step(self.head, direction, arena_size)
        carried = new_head
        index: int | None = HEAD
        while index is not None:
            segment = self.segments[index]
            vacated = segment.position
            segment.position = carried
            carried = vacated
            index = segment.next
        return new_head

    def validate(self) -> None:
        """Check that the chain is acyclic and every segment is reachable."""
        seen: set[int] = set()
        index: int | None = HEAD
        while index is not None:
            if index in seen:
                raise ChainError(f"Cycle detected at segment {index}.")
            if not 0 <= index < len(self.segments):
                raise ChainError(f"Dangling link to segment {index}.")
            seen.add(index)
            index = self.segments[index].next
        if len(seen) != len(self.segments):
            raise ChainError(
                f"{len(self.segments) - len(seen)} segment(s) unreachable "
                "from the head."
            )

    def to_dict(self) -> dict:
        return {"segments": [pos.to_list() for pos in self.positions()]}
