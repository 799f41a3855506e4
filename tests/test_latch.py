"""Tests for the direction latch and input mapping."""

from torus_snake.arena import Direction
from torus_snake.latch import DirectionLatch, handle_input, parse_key


class TestDirectionLatch:
    def test_starts_with_initial_heading(self):
        latch = DirectionLatch(Direction.LEFT)
        assert latch.current == Direction.LEFT
        assert latch.pending == Direction.LEFT

    def test_reversal_rejected(self):
        latch = DirectionLatch(Direction.LEFT)
        assert not latch.request(Direction.RIGHT)
        assert latch.commit() == Direction.LEFT

    def test_valid_request_applies_on_commit(self):
        latch = DirectionLatch(Direction.LEFT)
        assert latch.request(Direction.UP)
        assert latch.current == Direction.LEFT
        assert latch.commit() == Direction.UP
        assert latch.current == Direction.UP

    def test_last_valid_request_wins(self):
        latch = DirectionLatch(Direction.LEFT)
        latch.request(Direction.UP)
        latch.request(Direction.DOWN)
        assert latch.commit() == Direction.DOWN

    def test_reversal_checked_against_current_not_pending(self):
        # UP then RIGHT before a commit: RIGHT reverses LEFT and is dropped,
        # so the earlier UP survives.
        latch = DirectionLatch(Direction.LEFT)
        latch.request(Direction.UP)
        latch.request(Direction.RIGHT)
        assert latch.commit() == Direction.UP

    def test_reversal_allowed_after_turn_committed(self):
        latch = DirectionLatch(Direction.LEFT)
        latch.request(Direction.UP)
        latch.commit()
        assert latch.request(Direction.RIGHT)
        assert latch.commit() == Direction.RIGHT

    def test_never_commits_opposite(self):
        latch = DirectionLatch(Direction.LEFT)
        sequence = [Direction.RIGHT, Direction.UP, Direction.DOWN,
                    Direction.RIGHT, Direction.LEFT, Direction.RIGHT]
        for d in sequence:
            before = latch.current
            latch.request(d)
            assert latch.commit() != before.opposite

    def test_to_dict(self):
        latch = DirectionLatch(Direction.LEFT)
        latch.request(Direction.UP)
        assert latch.to_dict() == {"current": "left", "pending": "up"}


class TestHandleInput:
    def test_parse_key(self):
        assert parse_key("Up") == Direction.UP
        assert parse_key(" left ") == Direction.LEFT
        assert parse_key(Direction.DOWN) == Direction.DOWN
        assert parse_key("space") is None

    def test_priority_order(self):
        latch = DirectionLatch(Direction.LEFT)
        accepted = handle_input(latch, ["down", "up"])
        assert accepted == Direction.UP
        assert latch.pending == Direction.UP

    def test_falls_through_rejected_key(self):
        # UP is a reversal while heading DOWN, so RIGHT is taken next.
        latch = DirectionLatch(Direction.DOWN)
        assert handle_input(latch, [Direction.UP, Direction.RIGHT]) == Direction.RIGHT

    def test_only_reversal_pressed(self):
        latch = DirectionLatch(Direction.LEFT)
        assert handle_input(latch, ["right"]) is None
        assert latch.pending == Direction.LEFT

    def test_unknown_keys_ignored(self):
        latch = DirectionLatch(Direction.LEFT)
        assert handle_input(latch, ["escape", ""]) is None
