"""CounterFactory — builds counters with the configured default policies."""

from __future__ import annotations

import logging
from typing import Sequence

from modcounter.config import Settings, settings as default_settings
from modcounter.domain.entities.modulo_counter import ModuloCounter

logger = logging.getLogger(__name__)


class CounterFactory:
    """Creates ModuloCounters that share the policies from Settings."""

    def __init__(self, config: Settings | None = None):
        self._config = config or default_settings

    def create(self, threshold: int, ceiling: int) -> ModuloCounter:
        counter = ModuloCounter(
            threshold,
            ceiling,
            circular_mode=self._config.circular_mode,
            negative_steps=self._config.negative_steps,
        )
        logger.debug(
            "Created counter [%d, %d] (circular=%s, negative_steps=%s)",
            threshold, ceiling, counter.circular_mode.value, counter.negative_steps.value,
        )
        return counter

    def create_for(self, items: Sequence) -> ModuloCounter:
        """Counter over the indices of *items*, for use with ``pick_next``.

        Raises:
            InvalidRangeError: if fewer than two items are given.
        """
        return self.create(0, len(items) - 1)
