"""Fixed-rate clocks driven by elapsed wall time."""

from __future__ import annotations


class FixedTimestep:
    """Accumulates elapsed seconds and fires once per whole ``step``.

    A single :meth:`advance` can fire several times after a long frame;
    the leftover fraction carries over to the next call.
    """

    def __init__(self, step: float) -> None:
        if step <= 0:
            raise ValueError("step must be positive.")
        self.step = step
        self.accumulator = 0.0
        self.fired = 0

    def advance(self, elapsed: float) -> int:
        """Add *elapsed* seconds and return how many ticks are due."""
        if elapsed < 0:
            raise ValueError("elapsed must not be negative.")
        self.accumulator += elapsed
        ticks = 0
        while self.accumulator >= self.step:
            self.accumulator -= self.step
            ticks += 1
        self.fired += ticks
        return ticks

    def reset(self) -> None:
        self.accumulator = 0.0
        self.fired = 0
