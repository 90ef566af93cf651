"""Seat Pressure Pad Simulator

A simulator core for a pressure-sensing seat pad built from a 15x15 matrix
of force sensors read through two 16-channel multiplexers.

Main components:
- matrix: Pressure matrix store and brush editor
- metrics: Center-of-pressure analytics, static pressure alerts, posture analysis
- simulation: Scan sequencer, frame recorder, and simulator orchestrator
- visualization: Heatmaps with matplotlib and Plotly

Quick start:
    from seat_sim import SeatSimulator

    sim = SeatSimulator()
    sim.begin_stroke()
    sim.stroke((7, 7))
    sim.end_stroke()
    print(sim.center_of_pressure)
    print(sim.analyze_posture().to_markdown())
"""

__version__ = "0.1.0"

# Core types
from seat_sim.core.types import (
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

# Main simulator
from seat_sim.simulation import SeatSimulator, ScanSequencer, FrameRecorder

# Matrix
from seat_sim.matrix import MatrixStore, PressureEditor, apply_brush

# Metrics
from seat_sim.metrics import (
    PressureAnalytics,
    AlertStateMachine,
    PostureReport,
    analyze_posture,
)

__all__ = [
    # Version
    "__version__",
    # Core types
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
    # Simulator
    "SeatSimulator",
    "ScanSequencer",
    "FrameRecorder",
    # Matrix
    "MatrixStore",
    "PressureEditor",
    "apply_brush",
    # Metrics
    "PressureAnalytics",
    "AlertStateMachine",
    "PostureReport",
    "analyze_posture",
]
