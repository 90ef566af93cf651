"""Matrix store holding the live 15x15 pressure readings."""

import logging
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from seat_sim.core.constants import MATRIX_SIZE, MAX_PRESSURE, MIN_PRESSURE
from seat_sim.core.types import PressureMatrix

logger = logging.getLogger(__name__)


def empty_matrix() -> PressureMatrix:
    """Create an all-zero pressure matrix."""
    return np.zeros((MATRIX_SIZE, MATRIX_SIZE), dtype=np.int32)


def normalize_matrix(values: ArrayLike) -> PressureMatrix:
    """Validate shape and coerce readings into the ADC range.

    Non-integer readings are rounded half-up, then clamped to [0, 1023].

    Args:
        values: Array-like of shape (15, 15)

    Returns:
        New int32 matrix

    Raises:
        ValueError: If the input is not a 15x15 numeric grid
    """
    try:
        array = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Pressure matrix must be a numeric 15x15 grid: {e}") from e

    if array.shape != (MATRIX_SIZE, MATRIX_SIZE):
        raise ValueError(
            f"Pressure matrix shape {array.shape} doesn't match "
            f"({MATRIX_SIZE}, {MATRIX_SIZE})"
        )
    if not np.isfinite(array).all():
        raise ValueError("Pressure matrix contains non-finite values")

    rounded = np.floor(array + 0.5)
    clamped = np.clip(rounded, MIN_PRESSURE, MAX_PRESSURE)

    out_of_range = int((clamped != rounded).sum())
    if out_of_range:
        logger.debug("Clamped %d out-of-range readings", out_of_range)

    return clamped.astype(np.int32)


def freeze(matrix: PressureMatrix) -> PressureMatrix:
    """Return a read-only copy of a matrix."""
    snapshot = matrix.copy()
    snapshot.setflags(write=False)
    return snapshot


class MatrixStore:
    """Exclusive owner of the current pressure matrix.

    Readers only ever receive read-only snapshots. Writers submit a full
    replacement matrix which is swapped in atomically, so no reader can
    observe a half-updated grid.
    """

    def __init__(self, initial: Optional[ArrayLike] = None):
        """Initialize matrix store.

        Args:
            initial: Optional starting matrix (all zeros if None)
        """
        self._matrix = empty_matrix() if initial is None else normalize_matrix(initial)

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (MATRIX_SIZE, MATRIX_SIZE)

    def get(self) -> PressureMatrix:
        """Get an immutable snapshot of the current matrix."""
        return freeze(self._matrix)

    def set(self, new_matrix: ArrayLike) -> PressureMatrix:
        """Replace the full matrix.

        Args:
            new_matrix: Replacement readings of shape (15, 15)

        Returns:
            Snapshot of the stored matrix after clamping

        Raises:
            ValueError: If shape doesn't match the sensor grid
        """
        try:
            self._matrix = normalize_matrix(new_matrix)
        except ValueError:
            logger.warning("Rejected matrix update with invalid shape or values")
            raise
        return self.get()

    def reset(self) -> None:
        """Zero all cells."""
        self._matrix = empty_matrix()

    def value_at(self, row: int, col: int) -> int:
        """Get reading at a single cell.

        Args:
            row: Row index
            col: Column index

        Returns:
            Raw ADC reading
        """
        return int(self._matrix[row, col])
