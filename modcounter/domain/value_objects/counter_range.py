"""CounterRange value object — immutable inclusive [threshold, ceiling] pair."""

from dataclasses import dataclass

from modcounter.domain.errors import InvalidRangeError


def require_int(name: str, value: object) -> int:
    """Reject anything that is not a plain ``int`` (``bool`` included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class CounterRange:
    threshold: int
    ceiling: int

    def __post_init__(self) -> None:
        require_int("threshold", self.threshold)
        require_int("ceiling", self.ceiling)
        if self.threshold >= self.ceiling:
            raise InvalidRangeError(self.threshold, self.ceiling)

    @property
    def width(self) -> int:
        """Number of distinct positions in the range."""
        return self.ceiling - self.threshold + 1

    @property
    def span(self) -> int:
        return self.ceiling - self.threshold

    def contains(self, value: int) -> bool:
        return self.threshold <= value <= self.ceiling

    def advance(self, position: int, steps: int) -> int:
        """Move *position* by *steps* (negative = backwards), wrapping at both ends.

        Same result as repeating a single wrap-around step ``abs(steps)`` times.
        """
        return (position - self.threshold + steps) % self.width + self.threshold

    def wrap_once(self, target: int) -> int:
        """Offset *target* from the opposite boundary by its overshoot.

        Below the range the deficit is taken off the ceiling; above it the
        excess is added to the threshold. The result may still be out of
        range when the overshoot is larger than ``span``.
        """
        if target < self.threshold:
            return self.ceiling - (self.threshold - target)
        if target > self.ceiling:
            return self.threshold + (target - self.ceiling)
        return target

    def wrap(self, target: int) -> int:
        """Apply :meth:`wrap_once` until the value lands inside the range.

        Each wrap shifts the value by ``span``, so this reduces modulo
        ``span`` instead of looping. For a single overshoot it matches
        ``wrap_once`` exactly, e.g. on [2, 7]: 10 -> 5, 1 -> 6, 13 -> 3.
        """
        if target > self.ceiling:
            return self.threshold + (target - self.threshold - 1) % self.span + 1
        if target < self.threshold:
            return self.threshold + (target - self.threshold) % self.span
        return target
