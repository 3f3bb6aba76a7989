"""Domain errors raised by counters and ranges."""


class CounterError(ValueError):
    """Base class for counter rule violations."""


class InvalidRangeError(CounterError):
    def __init__(self, threshold: int, ceiling: int):
        self.threshold = threshold
        self.ceiling = ceiling
        super().__init__("Ceiling must be greater than threshold.")


class OutOfRangeError(CounterError):
    def __init__(self, target: int, threshold: int, ceiling: int):
        self.target = target
        self.threshold = threshold
        self.ceiling = ceiling
        super().__init__(
            "Can only move counter to a number between the threshold and the ceiling."
        )
