"""Matrix module for pressure storage and brush editing."""

from seat_sim.matrix.store import MatrixStore, empty_matrix, normalize_matrix, freeze
from seat_sim.matrix.editor import (
    PressureEditor,
    apply_brush,
    mode_for_button,
    PRIMARY_BUTTON,
    SECONDARY_BUTTON,
)

__all__ = [
    # Store
    "MatrixStore",
    "empty_matrix",
    "normalize_matrix",
    "freeze",
    # Editor
    "PressureEditor",
    "apply_brush",
    "mode_for_button",
    "PRIMARY_BUTTON",
    "SECONDARY_BUTTON",
]
