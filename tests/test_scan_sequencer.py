"""Tests for the multiplexer scan sequencer."""
import pytest

from seat_sim.core.types import ScanSpeed
from seat_sim.simulation import ScanSequencer, to_select_bits


class TestScanOrder:
    def test_starts_at_origin(self):
        scanner = ScanSequencer()
        assert scanner.cursor == (0, 0)
        assert scanner.is_scanning

    def test_column_advances_first(self):
        scanner = ScanSequencer()
        for _ in range(14):
            scanner.tick()
        assert scanner.cursor == (0, 14)
        assert scanner.tick() == (1, 0)

    def test_full_sweep_wraps(self):
        scanner = ScanSequencer()
        for _ in range(225):
            scanner.tick()
        assert scanner.cursor == (0, 0)
        assert scanner.tick_count == 225

    def test_tick_callback(self):
        scanner = ScanSequencer()
        seen = []
        scanner.set_tick_callback(lambda r, c: seen.append((r, c)))
        scanner.tick()
        scanner.tick()
        assert seen == [(0, 1), (0, 2)]


class TestCadence:
    def test_realtime_interval(self):
        scanner = ScanSequencer(ScanSpeed.REALTIME)
        assert scanner.interval_ms == 5
        assert scanner.advance(12) == 2
        assert scanner.advance(3) == 1
        assert scanner.cursor == (0, 3)

    def test_analysis_interval(self):
        scanner = ScanSequencer("analysis")
        assert scanner.advance(199) == 0
        assert scanner.advance(1) == 1

    def test_profile_switch_keeps_cursor(self):
        scanner = ScanSequencer("realtime")
        scanner.advance(50)
        assert scanner.cursor == (0, 10)

        scanner.set_profile("analysis")
        assert scanner.cursor == (0, 10)
        assert scanner.advance(100) == 0
        assert scanner.advance(100) == 1
        assert scanner.cursor == (0, 11)

    def test_invalid_profile(self):
        with pytest.raises(ValueError):
            ScanSequencer("turbo")
        scanner = ScanSequencer()
        with pytest.raises(ValueError):
            scanner.set_profile("turbo")

    def test_stopped_scanner_does_not_tick(self):
        scanner = ScanSequencer()
        scanner.advance(3)
        scanner.stop()
        assert not scanner.is_scanning
        assert scanner.advance(1000) == 0
        assert scanner.cursor == (0, 0)

        scanner.start()
        # Time before the stop is discarded
        assert scanner.advance(2) == 0
        assert scanner.advance(3) == 1

    def test_reset(self):
        scanner = ScanSequencer()
        scanner.advance(500)
        scanner.reset()
        assert scanner.cursor == (0, 0)
        assert scanner.tick_count == 0


class TestSelectLines:
    def test_bits_msb_first(self):
        assert to_select_bits(0) == "0000"
        assert to_select_bits(5) == "0101"
        assert to_select_bits(14) == "1110"

    def test_select_lines_follow_cursor(self):
        scanner = ScanSequencer()
        for _ in range(5 * 15 + 10):
            scanner.tick()
        assert scanner.cursor == (5, 10)
        assert scanner.select_lines() == ("0101", "1010")
