"""Metrics module for pressure analytics, alerts, and posture analysis."""

from seat_sim.metrics.pressure_metrics import (
    PressureAnalytics,
    StaticPressureTimer,
    center_of_pressure,
    compute_center_of_pressure,
)
from seat_sim.metrics.alerts import AlertStateMachine, AlertState, critical_message
from seat_sim.metrics.posture import (
    PostureAnalyzer,
    PostureReport,
    LateralBalance,
    SagittalBalance,
    PeakTier,
    analyze_posture,
)

__all__ = [
    "PressureAnalytics",
    "StaticPressureTimer",
    "center_of_pressure",
    "compute_center_of_pressure",
    "AlertStateMachine",
    "AlertState",
    "critical_message",
    "PostureAnalyzer",
    "PostureReport",
    "LateralBalance",
    "SagittalBalance",
    "PeakTier",
    "analyze_posture",
]
