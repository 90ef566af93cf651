"""Tests for the simulator orchestration."""
import numpy as np
import pytest

from seat_sim.core.types import AlertType, EditMode, SimulationState, SimulatorConfig
from seat_sim.matrix import SECONDARY_BUTTON
from seat_sim.simulation import SeatSimulator


@pytest.fixture
def sim(clock):
    return SeatSimulator(clock=clock)


class TestSustainedPressure:
    def test_alert_after_time_limit(self, sim, clock, matrix_with, six_zones):
        sim.set_matrix(matrix_with(six_zones, 950))
        assert sim.alerts == []

        clock.advance(5000)
        sim.refresh()
        assert sim.alerts == []

        clock.advance(1)
        sim.refresh()
        assert len(sim.alerts) == 1
        assert sim.alerts[0].alert_type is AlertType.CRITICAL
        assert "6 zones" in sim.alerts[0].message
        assert sim.alerts[0].id == f"crit-{clock()}"

    def test_alert_persists_until_relieved(self, sim, clock, matrix_with, six_zones):
        sim.set_matrix(matrix_with(six_zones, 950))
        clock.advance(6000)
        sim.refresh()

        sim.set_matrix(matrix_with(six_zones[:1], 950))
        assert len(sim.alerts) == 1

        sim.set_matrix(matrix_with(six_zones[:1], 900))
        assert sim.alerts == []

    def test_edits_do_not_restart_timers(self, sim, clock, matrix_with, six_zones):
        sim.set_matrix(matrix_with(six_zones, 950))
        clock.advance(3000)
        sim.apply_brush((0, 14), EditMode.ADD)
        clock.advance(2001)
        result = sim.refresh()
        assert result.critical_count == 6


class TestMutation:
    def test_bad_shape_leaves_matrix(self, sim):
        sim.set_matrix(np.full((15, 15), 10))
        with pytest.raises(ValueError):
            sim.set_matrix(np.zeros((3, 3)))
        assert sim.matrix.sum() == 2250
        assert sim.last_result.total_pressure == 2250

    def test_apply_brush_updates_analytics(self, sim):
        result = sim.apply_brush((7, 7), "add")
        assert result.max_value == 200
        assert result.total_pressure == 600
        assert sim.center_of_pressure.as_tuple() == (7.0, 7.0)

    def test_stroke_with_secondary_button(self, sim):
        sim.set_matrix(np.full((15, 15), 400))
        assert sim.begin_stroke(SECONDARY_BUTTON) is EditMode.REMOVE
        sim.stroke((3, 3))
        assert sim.matrix[3, 3] == 200
        assert sim.matrix[3, 4] == 200
        sim.stroke((3, 3))
        assert sim.matrix[3, 3] == 0
        sim.end_stroke()

        with pytest.raises(RuntimeError):
            sim.stroke((3, 3))

    def test_matrix_snapshot_read_only(self, sim):
        with pytest.raises(ValueError):
            sim.matrix[0, 0] = 1

    def test_reset(self, sim, clock, matrix_with, six_zones):
        sim.set_matrix(matrix_with(six_zones, 1000))
        clock.advance(6000)
        sim.refresh()
        sim.advance(100)

        sim.reset()
        assert sim.matrix.sum() == 0
        assert sim.alerts == []
        assert len(sim.analytics.timers) == 0
        assert sim.scanner.cursor == (0, 0)
        assert sim.center_of_pressure is None


class TestSubscriptions:
    def test_callback_receives_state(self, sim):
        states = []
        sim.subscribe(states.append)
        sim.apply_brush((2, 3))

        assert len(states) == 1
        state = states[0]
        assert isinstance(state, SimulationState)
        assert state.matrix[2, 3] == 200
        assert state.pressure_center is not None

    def test_unsubscribe(self, sim):
        states = []
        sim.subscribe(states.append)
        sim.unsubscribe(states.append)
        sim.apply_brush((2, 3))
        assert states == []

    def test_failed_update_does_not_notify(self, sim):
        states = []
        sim.subscribe(states.append)
        with pytest.raises(ValueError):
            sim.set_matrix(np.zeros((2, 2)))
        assert states == []


class TestTimeProgression:
    def test_advance_moves_scan(self, sim, clock):
        assert sim.advance(12) == 2
        state = sim.state()
        assert (state.active_row, state.active_col) == (0, 2)
        assert state.last_scan_time == clock()
        assert state.is_scanning

    def test_no_tick_keeps_last_scan_time(self, sim, clock):
        sim.advance(5)
        tick_time = clock()
        clock.advance(100)
        sim.advance(2)
        assert sim.state().last_scan_time == tick_time

    def test_scanned_value(self, sim, matrix_with):
        sim.set_matrix(matrix_with([(0, 3)], 777))
        sim.advance(15)
        assert sim.scanned_value() == 777

    def test_set_scan_speed_keeps_cursor(self, sim):
        sim.advance(20)
        sim.set_scan_speed("analysis")
        assert sim.scanner.cursor == (0, 4)
        assert sim.config.scan_speed.value == "analysis"
        assert sim.advance(199) == 0

    def test_recorder_sampled(self, sim, matrix_with):
        sim.set_matrix(matrix_with([(1, 1)], 500))
        sim.recorder.start()
        sim.advance(400)
        assert sim.recorder.frame_count == 2
        assert sim.recorder.frames[0].matrix[1, 1] == 500

    def test_recorded_timestamps_rise(self, sim, clock):
        sim.recorder.start()
        clock.advance(400)
        sim.advance(400)
        stamps = [f.timestamp for f in sim.recorder.frames]
        assert stamps == [clock() - 200, clock()]


class TestQueries:
    def test_set_language(self, sim):
        sim.set_language("es")
        assert sim.config.language == "es"
        with pytest.raises(ValueError):
            sim.set_language("fr")

    def test_posture_empty(self, sim):
        report = sim.analyze_posture()
        assert not report.user_detected
        assert report.to_markdown().startswith("### Postural Analysis Report\n\n")

    def test_posture_timestamped(self, sim):
        report = sim.analyze_posture(timestamped=True)
        assert report.generated_at is not None
        assert report.heading.startswith("### Postural Analysis Report (")

    def test_summary(self, sim, clock, matrix_with, six_zones):
        sim.set_matrix(matrix_with(six_zones, 950))
        clock.advance(5001)
        sim.refresh()
        assert sim.get_summary() == {
            "max_pressure": 950,
            "active_cells": 6,
            "critical_zones": 6,
            "sustained_zones": 6,
        }

    def test_config_not_shared_between_simulators(self, clock):
        config = SimulatorConfig()
        first = SeatSimulator(config=config, clock=clock)
        second = SeatSimulator(config=config, clock=clock)

        first.set_scan_speed("analysis")
        first.set_language("zh")
        assert second.config.scan_speed.value == "realtime"
        assert second.config.language == "en"
        assert config.scan_speed.value == "realtime"
        assert second.scanner.interval_ms == 5

    def test_config_thresholds_applied(self, clock, matrix_with):
        config = SimulatorConfig(static_time_limit_ms=1000, critical_zone_count=0)
        sim = SeatSimulator(config=config, clock=clock)
        sim.set_matrix(matrix_with([(5, 5)], 1000))
        clock.advance(1001)
        sim.refresh()
        assert len(sim.alerts) == 1
