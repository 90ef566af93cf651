"""Brush-based pressure editing simulating soft-tissue pressure spread."""

import math
from typing import Optional

from numpy.typing import ArrayLike

from seat_sim.core.constants import (
    BRUSH_INTENSITY,
    BRUSH_RADIUS,
    MATRIX_SIZE,
    MAX_PRESSURE,
    MIN_PRESSURE,
)
from seat_sim.core.types import EditMode, PressureMatrix
from seat_sim.matrix.store import normalize_matrix

# Pointer buttons as reported by mouse events
PRIMARY_BUTTON = 0
SECONDARY_BUTTON = 2


def apply_brush(
    matrix: ArrayLike,
    center: tuple[int, int],
    mode: EditMode,
    radius: int = BRUSH_RADIUS,
    intensity: float = BRUSH_INTENSITY,
) -> PressureMatrix:
    """Apply one brush dab around a cell.

    Every cell within Euclidean distance <= radius of the center is updated:
    add mode raises it by ``intensity * (1 - distance / 2)``, remove mode
    lowers it by ``intensity``. Results are rounded half-up and clamped to
    the ADC range. Cells outside the grid are skipped. The input is
    normalized first, so cells outside the brush are also rounded and clamped.

    Args:
        matrix: Current readings of shape (15, 15); not modified
        center: (row, col) of the brush center
        mode: Add or remove pressure
        radius: Brush radius in cells
        intensity: Pressure applied at the brush center

    Returns:
        New matrix with the dab applied

    Raises:
        ValueError: If the matrix is not a 15x15 numeric grid
    """
    mode = EditMode(mode)
    result = normalize_matrix(matrix)
    row, col = center

    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            r = row + i
            c = col + j
            if not (0 <= r < MATRIX_SIZE and 0 <= c < MATRIX_SIZE):
                continue

            distance = math.sqrt(i * i + j * j)
            if distance > radius:
                continue

            value = float(result[r, c])
            if mode is EditMode.ADD:
                value += intensity * (1 - distance / 2)
            else:
                value -= intensity

            value = math.floor(value + 0.5)
            result[r, c] = min(MAX_PRESSURE, max(MIN_PRESSURE, value))

    return result


def mode_for_button(button: int) -> EditMode:
    """Map a pointer button to a brush mode (secondary button removes)."""
    return EditMode.REMOVE if button == SECONDARY_BUTTON else EditMode.ADD


class PressureEditor:
    """Pointer interaction model for painting pressure.

    The brush mode is sampled once from the button that started the
    interaction and held until the interaction ends.

    Attributes:
        radius: Brush radius in cells
        intensity: Pressure applied at the brush center
    """

    def __init__(self, radius: int = BRUSH_RADIUS, intensity: float = BRUSH_INTENSITY):
        """Initialize pressure editor.

        Args:
            radius: Brush radius in cells
            intensity: Pressure applied at the brush center
        """
        self.radius = radius
        self.intensity = intensity
        self._mode: Optional[EditMode] = None

    @property
    def is_drawing(self) -> bool:
        """Whether a stroke is in progress."""
        return self._mode is not None

    @property
    def mode(self) -> Optional[EditMode]:
        """Mode held for the current stroke."""
        return self._mode

    def begin_stroke(self, button: int = PRIMARY_BUTTON) -> EditMode:
        """Start an interaction.

        Args:
            button: Pointer button that initiated the interaction

        Returns:
            Mode held for the stroke
        """
        self._mode = mode_for_button(button)
        return self._mode

    def stroke(self, matrix: ArrayLike, center: tuple[int, int]) -> PressureMatrix:
        """Apply the brush at a cell using the held mode.

        Args:
            matrix: Current readings
            center: (row, col) under the pointer

        Returns:
            New matrix with the dab applied

        Raises:
            RuntimeError: If no stroke is in progress
        """
        if self._mode is None:
            raise RuntimeError("No stroke in progress. Call begin_stroke() first.")
        return self.apply(matrix, center, self._mode)

    def end_stroke(self) -> None:
        """Finish the interaction."""
        self._mode = None

    def apply(
        self,
        matrix: ArrayLike,
        center: tuple[int, int],
        mode: EditMode,
    ) -> PressureMatrix:
        """Apply one dab with an explicit mode.

        Args:
            matrix: Current readings
            center: (row, col) of the brush center
            mode: Add or remove pressure

        Returns:
            New matrix with the dab applied
        """
        return apply_brush(matrix, center, mode, self.radius, self.intensity)
