"""ModuloCounter entity — an integer position that wraps inside a fixed range."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from modcounter.domain.errors import OutOfRangeError
from modcounter.domain.value_objects.counter_range import CounterRange, require_int
from modcounter.domain.value_objects.enums import CircularMode, NegativeStepPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CounterSnapshot:
    """Point-in-time view of a counter."""

    threshold: int
    ceiling: int
    current: int


class ModuloCounter:
    """A counter that restarts at the beginning after reaching the upper limit.

    Counting from 0 to 25 is ``ModuloCounter(0, 25)``: ``increment()`` moves
    the position up by one and, once it sits on 25, wraps it back to 0.
    ``decrement()`` wraps the other way, from 0 to 25.

    Both bounds are inclusive and fixed; the position starts at the threshold.

    Not thread-safe: callers sharing one counter across threads must hold
    their own lock around each call, ``increment_by`` included.
    """

    def __init__(
        self,
        threshold: int,
        ceiling: int,
        *,
        circular_mode: CircularMode = CircularMode.MULTI_WRAP,
        negative_steps: NegativeStepPolicy = NegativeStepPolicy.REVERSE,
    ):
        self._range = CounterRange(threshold, ceiling)
        self._circular_mode = CircularMode(circular_mode)
        self._negative_steps = NegativeStepPolicy(negative_steps)
        self._current = threshold

    # ─── Accessors ──────────────────────────────────────────────────

    @property
    def threshold(self) -> int:
        """Lower limit."""
        return self._range.threshold

    @property
    def ceiling(self) -> int:
        """Upper limit."""
        return self._range.ceiling

    @property
    def current(self) -> int:
        """The number the counter is currently up to."""
        return self._current

    @property
    def width(self) -> int:
        return self._range.width

    @property
    def bounds(self) -> CounterRange:
        return self._range

    @property
    def circular_mode(self) -> CircularMode:
        return self._circular_mode

    @property
    def negative_steps(self) -> NegativeStepPolicy:
        return self._negative_steps

    def snapshot(self) -> CounterSnapshot:
        return CounterSnapshot(self.threshold, self.ceiling, self._current)

    def __int__(self) -> int:
        return self._current

    def __index__(self) -> int:
        return self._current

    def __repr__(self) -> str:
        return (
            f"ModuloCounter(threshold={self.threshold}, ceiling={self.ceiling}, "
            f"current={self._current})"
        )

    # ─── Positioning ────────────────────────────────────────────────

    def reset(self) -> None:
        """Reset counter to threshold."""
        self._current = self.threshold

    def move_to(self, target: int) -> None:
        """Move to *target*.

        Raises:
            OutOfRangeError: if *target* is outside [threshold, ceiling].
                The position is left unchanged.
        """
        require_int("target", target)
        if not self._range.contains(target):
            logger.debug("Rejected move to %d outside [%d, %d]", target, self.threshold, self.ceiling)
            raise OutOfRangeError(target, self.threshold, self.ceiling)
        self._current = target

    def move_to_circular(self, target: int) -> None:
        """Move to *target*, wrapping around when it is out of range.

        The overshoot is measured from the boundary it crossed and applied
        from the opposite one: with threshold=2 and ceiling=7, 10 moves the
        counter to 5 (threshold + 3) and 1 moves it to 6 (ceiling - 1).

        In ``MULTI_WRAP`` mode the wrap repeats until the value is in range,
        so any integer is accepted. In ``SINGLE_WRAP`` mode only one wrap is
        made and a result still out of range raises ``OutOfRangeError``.
        """
        require_int("target", target)
        if self._circular_mode is CircularMode.SINGLE_WRAP:
            wrapped = self._range.wrap_once(target)
            self.move_to(wrapped)
        else:
            wrapped = self._range.wrap(target)
            self._current = wrapped
        if wrapped != target:
            logger.debug("Wrapped circular move %d -> %d", target, wrapped)

    def fast_forward_to_max(self) -> None:
        """Fast forward the counter to the ceiling."""
        self.move_to(self.ceiling)

    # ─── Stepping ───────────────────────────────────────────────────

    def increment(self) -> None:
        """Increment the counter by 1, wrapping from ceiling to threshold."""
        if self._current < self.ceiling:
            self._current += 1
        else:
            logger.debug("Counter wrapped %d -> %d", self.ceiling, self.threshold)
            self._current = self.threshold

    def decrement(self) -> None:
        """Decrement the counter by 1, wrapping from threshold to ceiling."""
        if self._current > self.threshold:
            self._current -= 1
        else:
            logger.debug("Counter wrapped %d -> %d", self.threshold, self.ceiling)
            self._current = self.ceiling

    def increment_by(self, steps: int) -> None:
        """Same as calling ``increment()`` *steps* times.

        Negative *steps* follow the counter's ``negative_steps`` policy.
        """
        require_int("steps", steps)
        if steps < 0 and self._negative_steps is NegativeStepPolicy.IGNORE:
            return
        self._current = self._range.advance(self._current, steps)

    def decrement_by(self, steps: int) -> None:
        """Same as calling ``decrement()`` *steps* times.

        Negative *steps* follow the counter's ``negative_steps`` policy.
        """
        require_int("steps", steps)
        if steps < 0 and self._negative_steps is NegativeStepPolicy.IGNORE:
            return
        self._current = self._range.advance(self._current, -steps)
