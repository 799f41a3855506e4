"""Pending growth requests and the processor that materialises them."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from torus_snake.arena import Position
    from torus_snake.chain import SegmentChain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowRequest:
    """Ask for a new tail segment at ``position``."""

    position: Position


class GrowQueue:
    """FIFO mailbox between the eat detector and the growth processor."""

    def __init__(self) -> None:
        self._requests: deque[GrowRequest] = deque()

    def push(self, position: Position) -> None:
        self._requests.append(GrowRequest(position))

    def __len__(self) -> int:
        return len(self._requests)

    def pending(self) -> list[GrowRequest]:
        """Return a snapshot of queued requests, oldest first."""
        return list(self._requests)

    def drain(self, chain: SegmentChain) -> int:
        """Append one tail segment per queued request, in FIFO order.

        Runs before the chain moves, so growth from an eat on tick T shows
        up on tick T+1. Returns the number of segments added.
        """
        added = 0
        while self._requests:
            request = self._requests.popleft()
            chain.append_tail(request.position)
            added += 1
        if added:
            logger.debug(
                "Grew chain by %d to length %d.", added, len(chain),
            )
        return added

    def to_dict(self) -> dict:
        return {"pending": [r.position.to_list() for r in self._requests]}
