"""Head-against-food detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from torus_snake.arena import Position
    from torus_snake.chain import SegmentChain
    from torus_snake.food import FoodField
    from torus_snake.growth import GrowQueue

logger = logging.getLogger(__name__)


def detect_eats(
    chain: SegmentChain,
    food: FoodField,
    queue: GrowQueue,
) -> list[Position]:
    """Consume every food item under the head and queue the growth.

    Must run right after the chain has moved. Each eaten item queues a grow
    request at the tail's current cell, which the tail vacates next tick.
    Returns the eaten positions.
    """
    head = chain.head
    eaten = [pos for pos in food if pos == head]
    for pos in eaten:
        food.remove(pos)
        tail = chain.tail
        queue.push(tail)
        logger.debug("Ate food at %s, growth queued at %s.", pos, tail)
    return eaten
