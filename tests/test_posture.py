"""Tests for the posture heuristic and its markdown report."""
from datetime import datetime

import numpy as np
import pytest

from seat_sim.core.types import PostureThresholds
from seat_sim.metrics import (
    LateralBalance,
    PeakTier,
    PostureAnalyzer,
    SagittalBalance,
    analyze_posture,
)
from seat_sim.metrics.posture import (
    DEFAULT_ADVICE,
    NO_USER_TEXT,
    REPOSITION_ADVICE,
    SUPPORTS_ADVICE,
    SURFACE_AREA_ADVICE,
)

SIX_CELLS = [(r, c) for r in (4, 7, 10) for c in (5, 9)]


def block(rows, cols, value):
    matrix = np.zeros((15, 15), dtype=np.int32)
    matrix[rows, cols] = value
    return matrix


class TestUserDetection:
    def test_empty_seat(self, zeros):
        report = analyze_posture(zeros)
        assert not report.user_detected
        assert report.to_markdown() == "### Postural Analysis Report\n\n" + NO_USER_TEXT

    def test_single_cell_is_not_a_user(self, matrix_with):
        assert not analyze_posture(matrix_with([(7, 7)], 1023)).user_detected

    def test_noise_floor_is_exclusive(self):
        report = analyze_posture(np.full((15, 15), 20))
        assert not report.user_detected
        assert report.active_cells == 0

    def test_low_total_is_not_a_user(self, matrix_with):
        thresholds = PostureThresholds(min_total_pressure=500)
        report = analyze_posture(matrix_with([(1, c) for c in range(6)], 50), thresholds)
        assert report.active_cells == 6
        assert report.total_pressure == 300
        assert not report.user_detected


class TestBalance:
    def test_uniform_load(self):
        report = analyze_posture(np.full((15, 15), 50))
        assert report.user_detected
        assert report.lateral is LateralBalance.BALANCED
        assert report.sagittal is SagittalBalance.NEUTRAL
        assert report.peak_tier is PeakTier.NORMAL
        assert report.recommendations == DEFAULT_ADVICE

    def test_leaning_left(self):
        report = analyze_posture(block(slice(5, 10), slice(0, 4), 500))
        assert report.lateral is LateralBalance.LEANING_LEFT
        assert report.lr_ratio == pytest.approx(1.0)
        assert report.load_asymmetry == pytest.approx(100.0)
        assert report.recommendations == (SUPPORTS_ADVICE,)
        assert "**Leaning Left:**" in report.to_markdown()
        assert "- **Load Asymmetry:** 100.0%" in report.to_markdown()

    def test_leaning_right(self):
        report = analyze_posture(block(slice(None), slice(10, 15), 100))
        assert report.lateral is LateralBalance.LEANING_RIGHT
        assert SUPPORTS_ADVICE in report.recommendations

    def test_forward_shift(self):
        report = analyze_posture(block(slice(10, 15), slice(None), 100))
        assert report.sagittal is SagittalBalance.FORWARD_SHIFT
        assert report.fb_ratio == pytest.approx(1.0)
        assert "**Forward Shift:**" in report.to_markdown()

    def test_reclined(self):
        report = analyze_posture(block(slice(0, 5), slice(None), 100))
        assert report.sagittal is SagittalBalance.RECLINED
        assert "**Reclined:**" in report.to_markdown()


class TestRecommendations:
    def test_concentrated_critical_load(self, matrix_with):
        report = analyze_posture(matrix_with(SIX_CELLS, 1000))
        assert report.peak_tier is PeakTier.CRITICAL
        assert report.lateral is LateralBalance.BALANCED
        assert report.recommendations == (REPOSITION_ADVICE, SURFACE_AREA_ADVICE)
        markdown = report.to_markdown()
        assert "- **Peak Pressure:** 1000/1023 (CRITICAL)" in markdown
        assert f"1. {REPOSITION_ADVICE}" in markdown
        assert f"3. {SURFACE_AREA_ADVICE}" in markdown
        assert DEFAULT_ADVICE[0] not in markdown

    def test_concentrated_high_load(self, matrix_with):
        report = analyze_posture(matrix_with(SIX_CELLS, 800))
        assert report.peak_tier is PeakTier.HIGH
        assert report.recommendations == (SURFACE_AREA_ADVICE,)
        assert f"\n3. {SURFACE_AREA_ADVICE}" in report.to_markdown()

    def test_supports_advice_keeps_its_number(self):
        markdown = analyze_posture(block(slice(5, 10), slice(0, 4), 500)).to_markdown()
        assert f"\n2. {SUPPORTS_ADVICE}" in markdown
        assert "\n1. " not in markdown

    def test_default_advice_numbered(self):
        markdown = analyze_posture(np.full((15, 15), 50)).to_markdown()
        assert f"1. {DEFAULT_ADVICE[0]}" in markdown
        assert f"2. {DEFAULT_ADVICE[1]}" in markdown


class TestReport:
    def test_deterministic(self):
        matrix = np.random.default_rng(7).integers(0, 1024, size=(15, 15))
        assert analyze_posture(matrix) == analyze_posture(matrix)
        assert analyze_posture(matrix).to_markdown() == analyze_posture(matrix).to_markdown()

    def test_heading_time(self, zeros):
        report = analyze_posture(zeros, generated_at=datetime(2024, 1, 1, 9, 5, 7))
        assert report.to_markdown().startswith("### Postural Analysis Report (09:05:07)\n\n")

    def test_str_is_markdown(self, zeros):
        report = analyze_posture(zeros)
        assert str(report) == report.to_markdown()

    def test_analyzer_uses_thresholds(self, matrix_with):
        analyzer = PostureAnalyzer(PostureThresholds(min_active_cells=1, min_total_pressure=1))
        report = analyzer.analyze(matrix_with([(7, 7)], 1023))
        assert report.user_detected

    def test_invalid_thresholds(self):
        with pytest.raises(ValueError):
            PostureThresholds(lateral_left=0.4, lateral_right=0.6)
