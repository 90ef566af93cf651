"""Core type definitions for the seat pad simulator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from seat_sim.core.constants import (
    ACTIVE_CELL_THRESHOLD,
    BRUSH_INTENSITY,
    BRUSH_RADIUS,
    CONCENTRATED_MAX_CELLS,
    CONCENTRATED_MIN_TOTAL,
    COP_ACTIVATION_THRESHOLD,
    CRITICAL_ZONE_COUNT,
    DEFAULT_RECORDING_LABEL,
    LATERAL_LEFT_RATIO,
    LATERAL_RIGHT_RATIO,
    PEAK_REPOSITION_THRESHOLD,
    POSTURE_MIN_ACTIVE_CELLS,
    POSTURE_MIN_TOTAL_PRESSURE,
    POSTURE_NOISE_FLOOR,
    PRESSURE_THRESHOLD_CRITICAL,
    PRESSURE_THRESHOLD_WARNING,
    RECORDING_INTERVAL_MS,
    SAGITTAL_FORWARD_RATIO,
    SAGITTAL_RECLINED_RATIO,
    SCAN_INTERVALS_MS,
    STATIC_PRESSURE_TIME_LIMIT_MS,
    SUPPORTED_LANGUAGES,
)

PressureMatrix = NDArray[np.int32]


class ScanSpeed(str, Enum):
    """Scan cadence profiles."""

    ANALYSIS = "analysis"
    REALTIME = "realtime"

    @property
    def interval_ms(self) -> int:
        """Tick interval for this profile in milliseconds."""
        return SCAN_INTERVALS_MS[self.value]


class EditMode(str, Enum):
    """Brush modes for the pressure editor."""

    ADD = "add"
    REMOVE = "remove"


class AlertType(str, Enum):
    """Alert severity classes."""

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Point:
    """Continuous grid coordinate (not bound to integer cells)."""

    row: float
    col: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.row, self.col)


@dataclass(frozen=True)
class Alert:
    """Alert shown to the user.

    Attributes:
        id: Unique identifier (timestamp derived for critical alerts)
        alert_type: Severity class
        message: Human-readable message
        timestamp: Creation time in epoch milliseconds
    """

    id: str
    alert_type: AlertType
    message: str
    timestamp: int


@dataclass(frozen=True)
class RecordedFrame:
    """Single captured matrix sample for training data export."""

    timestamp: int
    label: str
    matrix: PressureMatrix

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "label": self.label,
            "matrix": self.matrix.tolist(),
        }


@dataclass(frozen=True)
class AnalyticsResult:
    """Output of one analytics pass over a matrix snapshot.

    Attributes:
        total_pressure: Sum of all cell readings
        center_of_pressure: Pressure-weighted centroid, None below activation threshold
        max_value: Peak cell reading
        active_cells: Cells above the display activity threshold
        critical_cells: Cells currently above the critical threshold
        critical_count: Cells sustained above the critical threshold past the time limit
        timestamp: Time of the pass in epoch milliseconds
    """

    total_pressure: int
    center_of_pressure: Optional[Point]
    max_value: int
    active_cells: int
    critical_cells: int
    critical_count: int
    timestamp: int


@dataclass
class SimulationState:
    """Snapshot consumed by rendering collaborators.

    Attributes:
        matrix: Current (read-only) pressure matrix
        active_row: Row currently addressed by the scan
        active_col: Column currently addressed by the scan
        is_scanning: Whether the scan sequencer is running
        pressure_center: Current center of pressure
        alerts: Active alerts, newest first
        last_scan_time: Time of the last scan tick in epoch milliseconds
    """

    matrix: PressureMatrix
    active_row: int
    active_col: int
    is_scanning: bool
    pressure_center: Optional[Point]
    alerts: list[Alert] = field(default_factory=list)
    last_scan_time: int = 0


@dataclass
class PostureThresholds:
    """Calibration constants for the posture heuristic.

    Attributes:
        noise_floor: Readings at or below this are ignored
        min_active_cells: Fewer active cells means nobody is seated
        min_total_pressure: Less total pressure means nobody is seated
        lateral_left: Left ratio above this flags a left lean
        lateral_right: Left ratio below this flags a right lean
        sagittal_forward: Front ratio above this flags a forward shift
        sagittal_reclined: Front ratio below this flags a reclined posture
        peak_critical: Peak tier boundary for CRITICAL
        peak_high: Peak tier boundary for HIGH
        peak_reposition: Peak above this triggers the reposition advisory
        concentrated_max_cells: Active cell count below this may be concentrated
        concentrated_min_total: Total pressure above this may be concentrated
    """

    noise_floor: int = POSTURE_NOISE_FLOOR
    min_active_cells: int = POSTURE_MIN_ACTIVE_CELLS
    min_total_pressure: int = POSTURE_MIN_TOTAL_PRESSURE
    lateral_left: float = LATERAL_LEFT_RATIO
    lateral_right: float = LATERAL_RIGHT_RATIO
    sagittal_forward: float = SAGITTAL_FORWARD_RATIO
    sagittal_reclined: float = SAGITTAL_RECLINED_RATIO
    peak_critical: int = PRESSURE_THRESHOLD_CRITICAL
    peak_high: int = PRESSURE_THRESHOLD_WARNING
    peak_reposition: int = PEAK_REPOSITION_THRESHOLD
    concentrated_max_cells: int = CONCENTRATED_MAX_CELLS
    concentrated_min_total: int = CONCENTRATED_MIN_TOTAL

    def __post_init__(self) -> None:
        """Validate ratio ordering."""
        if not 0.0 <= self.lateral_right <= self.lateral_left <= 1.0:
            raise ValueError(
                f"lateral ratios must satisfy 0 <= right ({self.lateral_right}) "
                f"<= left ({self.lateral_left}) <= 1"
            )
        if not 0.0 <= self.sagittal_reclined <= self.sagittal_forward <= 1.0:
            raise ValueError(
                f"sagittal ratios must satisfy 0 <= reclined ({self.sagittal_reclined}) "
                f"<= forward ({self.sagittal_forward}) <= 1"
            )


@dataclass
class SimulatorConfig:
    """Complete simulator configuration.

    Attributes:
        scan_speed: Scan cadence profile
        language: Display language tag (presentation only)
        brush_radius: Brush radius in cells
        brush_intensity: Pressure added or removed per brush application
        activation_threshold: Minimum total pressure for a center of pressure
        critical_threshold: Cell reading that starts a static pressure timer
        static_time_limit_ms: Age after which a timer counts as sustained
        critical_zone_count: Sustained cells needed to raise a critical alert
        active_cell_threshold: Cell reading counted as active in summary stats
        recording_interval_ms: Frame recorder sampling period
        recording_label: Default label attached to recorded frames
        posture: Posture heuristic thresholds
    """

    scan_speed: ScanSpeed = ScanSpeed.REALTIME
    language: str = "en"

    brush_radius: int = BRUSH_RADIUS
    brush_intensity: int = BRUSH_INTENSITY

    activation_threshold: int = COP_ACTIVATION_THRESHOLD
    critical_threshold: int = PRESSURE_THRESHOLD_CRITICAL
    static_time_limit_ms: int = STATIC_PRESSURE_TIME_LIMIT_MS
    critical_zone_count: int = CRITICAL_ZONE_COUNT
    active_cell_threshold: int = ACTIVE_CELL_THRESHOLD

    recording_interval_ms: int = RECORDING_INTERVAL_MS
    recording_label: str = DEFAULT_RECORDING_LABEL

    posture: PostureThresholds = field(default_factory=PostureThresholds)

    def __post_init__(self) -> None:
        """Normalize enum fields and validate ranges."""
        self.scan_speed = ScanSpeed(self.scan_speed)
        if self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"language must be one of {SUPPORTED_LANGUAGES}, got {self.language!r}"
            )
        if self.brush_radius < 0:
            raise ValueError(f"brush_radius must be >= 0, got {self.brush_radius}")
        if self.recording_interval_ms <= 0:
            raise ValueError(
                f"recording_interval_ms must be positive, got {self.recording_interval_ms}"
            )
        if isinstance(self.posture, dict):
            self.posture = PostureThresholds(**self.posture)
