"""Pytest configuration and shared fixtures."""

import pytest

from modcounter.domain.entities.modulo_counter import ModuloCounter


@pytest.fixture
def counter_2_7():
    return ModuloCounter(2, 7)


@pytest.fixture
def counter_3_17():
    return ModuloCounter(3, 17)


@pytest.fixture
def negative_counter():
    return ModuloCounter(-3, -2)
