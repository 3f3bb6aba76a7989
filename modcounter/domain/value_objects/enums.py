"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class CircularMode(str, Enum):
    """How ``move_to_circular`` handles targets more than one span away."""

    MULTI_WRAP = "multi_wrap"
    SINGLE_WRAP = "single_wrap"


class NegativeStepPolicy(str, Enum):
    """How ``increment_by`` / ``decrement_by`` handle negative step counts."""

    REVERSE = "reverse"
    IGNORE = "ignore"
