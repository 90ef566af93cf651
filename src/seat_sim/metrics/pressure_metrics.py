"""Center-of-pressure and static pressure analytics."""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from seat_sim.core.constants import (
    ACTIVE_CELL_THRESHOLD,
    COP_ACTIVATION_THRESHOLD,
    MATRIX_SIZE,
    PRESSURE_THRESHOLD_CRITICAL,
    STATIC_PRESSURE_TIME_LIMIT_MS,
)
from seat_sim.core.types import AnalyticsResult, Point


class StaticPressureTimer:
    """First-exceed timestamps for cells above the critical threshold.

    Stored as a fixed (15, 15) table where NaN marks an absent entry, so a
    cell has a timestamp if and only if its last observed reading exceeded
    the threshold.
    """

    def __init__(self, threshold: float = PRESSURE_THRESHOLD_CRITICAL):
        """Initialize timer table.

        Args:
            threshold: Reading a cell must exceed to start its timer
        """
        self.threshold = threshold
        self._first_exceed = np.full((MATRIX_SIZE, MATRIX_SIZE), np.nan)

    def __len__(self) -> int:
        return int((~np.isnan(self._first_exceed)).sum())

    def __contains__(self, cell: tuple[int, int]) -> bool:
        return not np.isnan(self._first_exceed[cell])

    def update(self, matrix: NDArray, now: int) -> None:
        """Insert or drop entries from a matrix snapshot.

        Cells above threshold keep their earliest first-exceed time; cells at
        or below threshold lose their entry immediately.

        Args:
            matrix: Readings of shape (15, 15)
            now: Current time in epoch milliseconds
        """
        above = matrix > self.threshold
        started = above & np.isnan(self._first_exceed)
        self._first_exceed[started] = now
        self._first_exceed[~above] = np.nan

    def first_exceed(self, row: int, col: int) -> Optional[int]:
        """Get when a cell first exceeded the threshold.

        Args:
            row: Row index
            col: Column index

        Returns:
            Timestamp in epoch milliseconds, or None if not above threshold
        """
        value = self._first_exceed[row, col]
        if np.isnan(value):
            return None
        return int(value)

    def entries(self) -> dict[tuple[int, int], int]:
        """All active entries as a {(row, col): timestamp} mapping."""
        cells = np.argwhere(~np.isnan(self._first_exceed))
        return {(int(r), int(c)): int(self._first_exceed[r, c]) for r, c in cells}

    def ages(self, now: int) -> NDArray[np.float64]:
        """Age of each entry in milliseconds (NaN where absent)."""
        return now - self._first_exceed

    def count_older_than(self, now: int, limit_ms: float) -> int:
        """Count entries whose age strictly exceeds a limit.

        Args:
            now: Current time in epoch milliseconds
            limit_ms: Age limit in milliseconds

        Returns:
            Number of sustained cells
        """
        ages = self.ages(now)
        present = ~np.isnan(ages)
        return int((ages[present] > limit_ms).sum())

    def clear(self) -> None:
        """Drop all entries."""
        self._first_exceed.fill(np.nan)


class PressureAnalytics:
    """Recomputes pressure statistics whenever the matrix changes.

    Each update is a single pass over one snapshot: the center-of-pressure
    sums and the static pressure timers always see the same readings.
    The engine owns its timer table and carries it between updates.

    Attributes:
        activation_threshold: Minimum total pressure for a center of pressure
        static_time_limit_ms: Age after which a timer entry counts as sustained
        active_cell_threshold: Reading counted as an active cell
        timers: Static pressure timer table
    """

    def __init__(
        self,
        activation_threshold: float = COP_ACTIVATION_THRESHOLD,
        critical_threshold: float = PRESSURE_THRESHOLD_CRITICAL,
        static_time_limit_ms: float = STATIC_PRESSURE_TIME_LIMIT_MS,
        active_cell_threshold: float = ACTIVE_CELL_THRESHOLD,
    ):
        """Initialize analytics engine.

        Args:
            activation_threshold: Minimum total pressure for a center of pressure
            critical_threshold: Reading that starts a static pressure timer
            static_time_limit_ms: Sustained duration limit in milliseconds
            active_cell_threshold: Reading counted as an active cell
        """
        self.activation_threshold = activation_threshold
        self.static_time_limit_ms = static_time_limit_ms
        self.active_cell_threshold = active_cell_threshold
        self.timers = StaticPressureTimer(critical_threshold)
        self._last_result: Optional[AnalyticsResult] = None

    @property
    def critical_threshold(self) -> float:
        return self.timers.threshold

    @property
    def last_result(self) -> Optional[AnalyticsResult]:
        """Result of the most recent update."""
        return self._last_result

    def update(self, matrix: ArrayLike, now: int) -> AnalyticsResult:
        """Run one analytics pass.

        Args:
            matrix: Readings of shape (15, 15)
            now: Current time in epoch milliseconds

        Returns:
            Statistics for this snapshot
        """
        grid = np.asarray(matrix, dtype=np.int64)

        total = int(grid.sum())
        indices = np.arange(grid.shape[0])
        weighted_row = int((grid.sum(axis=1) * indices).sum())
        weighted_col = int((grid.sum(axis=0) * indices).sum())
        max_value = int(grid.max())

        self.timers.update(grid, now)

        self._last_result = AnalyticsResult(
            total_pressure=total,
            center_of_pressure=center_of_pressure(
                total, weighted_row, weighted_col, self.activation_threshold
            ),
            max_value=max_value,
            active_cells=int((grid > self.active_cell_threshold).sum()),
            critical_cells=int((grid > self.critical_threshold).sum()),
            critical_count=self.critical_count(now),
            timestamp=now,
        )
        return self._last_result

    def critical_count(self, now: int) -> int:
        """Number of cells sustained above the critical threshold.

        Args:
            now: Current time in epoch milliseconds

        Returns:
            Count of timer entries older than the time limit
        """
        return self.timers.count_older_than(now, self.static_time_limit_ms)

    def reset(self) -> None:
        """Clear timers and the cached result."""
        self.timers.clear()
        self._last_result = None


def center_of_pressure(
    total: float,
    weighted_row: float,
    weighted_col: float,
    activation_threshold: float = COP_ACTIVATION_THRESHOLD,
) -> Optional[Point]:
    """Pressure-weighted centroid from precomputed sums.

    Args:
        total: Sum of all readings
        weighted_row: Sum of reading * row index
        weighted_col: Sum of reading * column index
        activation_threshold: Total must exceed this for a result

    Returns:
        Centroid, or None when the seat is effectively empty
    """
    if total <= activation_threshold:
        return None
    return Point(row=weighted_row / total, col=weighted_col / total)


def compute_center_of_pressure(
    matrix: ArrayLike,
    activation_threshold: float = COP_ACTIVATION_THRESHOLD,
) -> Optional[Point]:
    """Stateless center-of-pressure for a single matrix.

    Args:
        matrix: Readings of shape (15, 15)
        activation_threshold: Total must exceed this for a result

    Returns:
        Centroid or None
    """
    grid = np.asarray(matrix, dtype=np.int64)
    indices = np.arange(grid.shape[0])
    return center_of_pressure(
        int(grid.sum()),
        int((grid.sum(axis=1) * indices).sum()),
        int((grid.sum(axis=0) * indices).sum()),
        activation_threshold,
    )
