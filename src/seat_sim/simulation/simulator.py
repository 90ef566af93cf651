"""Main simulation orchestrator for the seat pressure pad."""

import logging
import threading
import time
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Union

from numpy.typing import ArrayLike

from seat_sim.core.constants import SUPPORTED_LANGUAGES
from seat_sim.core.types import (
    Alert,
    AnalyticsResult,
    EditMode,
    Point,
    PressureMatrix,
    ScanSpeed,
    SimulationState,
    SimulatorConfig,
)
from seat_sim.matrix.editor import PRIMARY_BUTTON, PressureEditor
from seat_sim.matrix.store import MatrixStore
from seat_sim.metrics.alerts import AlertStateMachine
from seat_sim.metrics.posture import PostureReport, analyze_posture
from seat_sim.metrics.pressure_metrics import PressureAnalytics
from seat_sim.simulation.recorder import FrameRecorder
from seat_sim.simulation.scan_sequencer import ScanSequencer

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
StateCallback = Callable[[SimulationState], None]


def system_clock() -> int:
    """Current wall time in epoch milliseconds."""
    return int(time.time() * 1000)


class SeatSimulator:
    """Coordinates matrix storage, analytics, alerts, scanning and recording.

    Every matrix mutation runs store update, analytics recompute and alert
    evaluation as one serialized step, then notifies subscribers with the
    resulting state. The scan cursor and recorder are driven separately by
    ``advance``.

    Attributes:
        config: Simulator configuration
        store: Pressure matrix store
        editor: Brush editor
        analytics: Pressure analytics engine
        alert_machine: Critical alert state machine
        scanner: Multiplexer scan sequencer
        recorder: Training data frame recorder
    """

    def __init__(
        self,
        config: Optional[SimulatorConfig] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize simulator.

        Args:
            config: Simulator configuration, copied (uses defaults if None)
            clock: Time source in epoch milliseconds (system clock if None)
        """
        self.config = replace(config) if config is not None else SimulatorConfig()
        self._clock = clock or system_clock

        self.store = MatrixStore()
        self.editor = PressureEditor(
            radius=self.config.brush_radius,
            intensity=self.config.brush_intensity,
        )
        self.analytics = PressureAnalytics(
            activation_threshold=self.config.activation_threshold,
            critical_threshold=self.config.critical_threshold,
            static_time_limit_ms=self.config.static_time_limit_ms,
            active_cell_threshold=self.config.active_cell_threshold,
        )
        self.alert_machine = AlertStateMachine(zone_count=self.config.critical_zone_count)
        self.scanner = ScanSequencer(self.config.scan_speed)
        self.recorder = FrameRecorder(
            label=self.config.recording_label,
            interval_ms=self.config.recording_interval_ms,
        )

        self._lock = threading.Lock()
        self._subscribers: list[StateCallback] = []
        self._last_scan_time = 0

        self._result = self.analytics.update(self.store.get(), self._clock())

    @property
    def matrix(self) -> PressureMatrix:
        """Read-only snapshot of the current matrix."""
        return self.store.get()

    @property
    def last_result(self) -> AnalyticsResult:
        """Analytics of the most recent update."""
        return self._result

    @property
    def center_of_pressure(self) -> Optional[Point]:
        return self._result.center_of_pressure

    @property
    def alerts(self) -> list[Alert]:
        """Active alerts, newest first."""
        return self.alert_machine.alerts

    # Matrix mutation

    def set_matrix(self, matrix: ArrayLike) -> AnalyticsResult:
        """Replace the matrix and recompute analytics and alerts.

        Args:
            matrix: Replacement readings of shape (15, 15)

        Returns:
            Analytics for the new matrix

        Raises:
            ValueError: If shape doesn't match the sensor grid
        """
        return self._mutate(lambda _current: matrix)

    def apply_brush(
        self,
        center: tuple[int, int],
        mode: Union[EditMode, str] = EditMode.ADD,
    ) -> AnalyticsResult:
        """Apply one brush dab with an explicit mode.

        Args:
            center: (row, col) of the brush center
            mode: Add or remove pressure

        Returns:
            Analytics for the edited matrix
        """
        mode = EditMode(mode)
        return self._mutate(lambda current: self.editor.apply(current, center, mode))

    def begin_stroke(self, button: int = PRIMARY_BUTTON) -> EditMode:
        """Start a pointer interaction; the button fixes the brush mode."""
        return self.editor.begin_stroke(button)

    def stroke(self, center: tuple[int, int]) -> AnalyticsResult:
        """Apply the brush at a cell during a pointer interaction.

        Args:
            center: (row, col) under the pointer

        Returns:
            Analytics for the edited matrix

        Raises:
            RuntimeError: If no interaction is in progress
        """
        return self._mutate(lambda current: self.editor.stroke(current, center))

    def end_stroke(self) -> None:
        """Finish the pointer interaction."""
        self.editor.end_stroke()

    def refresh(self) -> AnalyticsResult:
        """Re-run analytics and alerts on the unchanged matrix.

        Lets sustained static pressure age into an alert without a new edit.

        Returns:
            Analytics for the current matrix
        """
        with self._lock:
            result = self._recompute()
        self._notify()
        return result

    def reset(self) -> None:
        """Zero the matrix, clear timers and alerts, and rewind the scan."""
        with self._lock:
            self.store.reset()
            self.analytics.reset()
            self.alert_machine.clear()
            self.scanner.reset()
            self._recompute()
        logger.info("Simulator reset")
        self._notify()

    def _mutate(
        self, compute: Callable[[PressureMatrix], ArrayLike]
    ) -> AnalyticsResult:
        with self._lock:
            self.store.set(compute(self.store.get()))
            result = self._recompute()
        self._notify()
        return result

    def _recompute(self) -> AnalyticsResult:
        now = self._clock()
        self._result = self.analytics.update(self.store.get(), now)
        self.alert_machine.evaluate(self._result.critical_count, now)
        return self._result

    # Time progression

    def advance(self, elapsed_ms: float) -> int:
        """Advance scan and recorder timers.

        Args:
            elapsed_ms: Wall time elapsed since the previous call

        Returns:
            Number of scan ticks performed
        """
        now = self._clock()
        ticks = self.scanner.advance(elapsed_ms)
        if ticks:
            self._last_scan_time = now

        self.recorder.sample(self.store.get(), elapsed_ms, now)
        return ticks

    def set_scan_speed(self, profile: Union[ScanSpeed, str]) -> None:
        """Switch scan cadence profile without moving the cursor."""
        self.scanner.set_profile(profile)
        self.config.scan_speed = self.scanner.profile

    def set_language(self, language: str) -> None:
        """Set display language tag (presentation only).

        Raises:
            ValueError: If the language is not supported
        """
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"language must be one of {SUPPORTED_LANGUAGES}, got {language!r}"
            )
        self.config.language = language

    # Queries

    def analyze_posture(self, timestamped: bool = False) -> PostureReport:
        """Posture report for the current matrix.

        Args:
            timestamped: Show the current time in the report heading

        Returns:
            Posture report
        """
        generated_at = None
        if timestamped:
            generated_at = datetime.fromtimestamp(self._clock() / 1000)
        return analyze_posture(self.store.get(), self.config.posture, generated_at)

    def scanned_value(self) -> int:
        """Reading at the scan cursor (the virtual analogRead)."""
        row, col = self.scanner.cursor
        return self.store.value_at(row, col)

    def state(self) -> SimulationState:
        """Snapshot for rendering collaborators."""
        row, col = self.scanner.cursor
        return SimulationState(
            matrix=self.store.get(),
            active_row=row,
            active_col=col,
            is_scanning=self.scanner.is_scanning,
            pressure_center=self._result.center_of_pressure,
            alerts=self.alert_machine.alerts,
            last_scan_time=self._last_scan_time,
        )

    def get_summary(self) -> dict[str, int]:
        """Stats bar values for the current matrix.

        Returns:
            Dictionary with max pressure, active cells and critical zones
        """
        return {
            "max_pressure": self._result.max_value,
            "active_cells": self._result.active_cells,
            "critical_zones": self._result.critical_cells,
            "sustained_zones": self._result.critical_count,
        }

    # Subscriptions

    def subscribe(self, callback: StateCallback) -> None:
        """Register a callback invoked with the state after each mutation."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: StateCallback) -> None:
        """Remove a previously registered callback."""
        self._subscribers.remove(callback)

    def _notify(self) -> None:
        if not self._subscribers:
            return
        state = self.state()
        for callback in list(self._subscribers):
            callback(state)
