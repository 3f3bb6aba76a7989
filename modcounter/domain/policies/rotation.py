"""RotationPolicy — cycle through a fixed list using a counter as the ring index."""

from __future__ import annotations

from typing import Sequence, TypeVar

from modcounter.domain.entities.modulo_counter import ModuloCounter

T = TypeVar("T")


def pick_next(items: Sequence[T], counter: ModuloCounter) -> T:
    """Return the item under the counter and advance the counter by one.

    The counter's position is an offset from its threshold, so a counter
    over [0, n - 1] and one over [10, 10 + n - 1] rotate the same way.

    Args:
        items: non-empty sequence with exactly ``counter.width`` entries.
        counter: ring index; mutated in place.

    Raises:
        ValueError: if items is empty or does not match the counter width.
    """
    if not items:
        raise ValueError("Cannot pick from an empty item list")
    if len(items) != counter.width:
        raise ValueError(
            f"Counter covers {counter.width} positions but {len(items)} items were given"
        )

    chosen = items[counter.current - counter.threshold]
    counter.increment()
    return chosen
