"""Tests for RotationPolicy."""

import pytest

from modcounter.domain.entities.modulo_counter import ModuloCounter
from modcounter.domain.policies.rotation import pick_next


def test_pick_alternates_between_two():
    """Position 0 → first, 1 → second, then back to first."""
    counter = ModuloCounter(0, 1)
    picks = [pick_next(["a", "b"], counter) for _ in range(4)]
    assert picks == ["a", "b", "a", "b"]


def test_pick_three_items_cycles():
    counter = ModuloCounter(0, 2)
    picks = [pick_next(["x", "y", "z"], counter) for _ in range(6)]
    assert picks == ["x", "y", "z", "x", "y", "z"]


def test_pick_uses_offset_from_threshold():
    counter = ModuloCounter(10, 12)
    counter.move_to(12)
    assert pick_next(["x", "y", "z"], counter) == "z"
    assert counter.current == 10


def test_pick_resumes_after_manual_move():
    counter = ModuloCounter(0, 3)
    counter.move_to_circular(5)  # 5 → 0 + 2
    assert pick_next(["a", "b", "c", "d"], counter) == "c"


def test_pick_empty_raises():
    with pytest.raises(ValueError, match="empty item list"):
        pick_next([], ModuloCounter(0, 1))


def test_pick_width_mismatch_raises():
    counter = ModuloCounter(0, 3)
    with pytest.raises(ValueError, match="4 positions but 3 items"):
        pick_next(["a", "b", "c"], counter)
    assert counter.current == 0
