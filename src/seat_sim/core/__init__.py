"""Core types and constants for the seat pad simulator."""

from seat_sim.core.constants import (
    MATRIX_SIZE,
    MAX_PRESSURE,
    MIN_PRESSURE,
    PRESSURE_THRESHOLD_WARNING,
    PRESSURE_THRESHOLD_CRITICAL,
    COP_ACTIVATION_THRESHOLD,
    STATIC_PRESSURE_TIME_LIMIT_MS,
    CRITICAL_ZONE_COUNT,
    SCAN_INTERVALS_MS,
)
from seat_sim.core.types import (
    PressureMatrix,
    ScanSpeed,
    EditMode,
    AlertType,
    Point,
    Alert,
    RecordedFrame,
    AnalyticsResult,
    SimulationState,
    PostureThresholds,
    SimulatorConfig,
)
from seat_sim.core.config_loader import (
    load_config,
    load_config_file,
    config_from_dict,
    save_config,
)

__all__ = [
    # Constants
    "MATRIX_SIZE",
    "MAX_PRESSURE",
    "MIN_PRESSURE",
    "PRESSURE_THRESHOLD_WARNING",
    "PRESSURE_THRESHOLD_CRITICAL",
    "COP_ACTIVATION_THRESHOLD",
    "STATIC_PRESSURE_TIME_LIMIT_MS",
    "CRITICAL_ZONE_COUNT",
    "SCAN_INTERVALS_MS",
    # Types
    "PressureMatrix",
    "ScanSpeed",
    "EditMode",
    "AlertType",
    "Point",
    "Alert",
    "RecordedFrame",
    "AnalyticsResult",
    "SimulationState",
    "PostureThresholds",
    "SimulatorConfig",
    # Config I/O
    "load_config",
    "load_config_file",
    "config_from_dict",
    "save_config",
]
