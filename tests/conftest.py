"""Shared fixtures for the seat simulator tests."""
import numpy as np
import pytest

from seat_sim.core.constants import MATRIX_SIZE


class ManualClock:
    """Millisecond clock advanced explicitly by tests."""

    def __init__(self, start_ms=1_000_000):
        self.now = start_ms

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def zeros():
    return np.zeros((MATRIX_SIZE, MATRIX_SIZE), dtype=np.int32)


@pytest.fixture
def matrix_with():
    """Factory for a zero matrix with the given (row, col) cells set to value."""

    def build(cells, value):
        matrix = np.zeros((MATRIX_SIZE, MATRIX_SIZE), dtype=np.int32)
        for r, c in cells:
            matrix[r, c] = value
        return matrix

    return build


@pytest.fixture
def six_zones():
    return [(2, 2), (2, 12), (7, 7), (12, 2), (12, 12), (7, 3)]
