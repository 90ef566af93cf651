"""Deterministic postural analysis from a pressure matrix snapshot.

This is a fixed heuristic, not a trained classifier: the same matrix always
yields the same report. Seat orientation follows the sensor layout, with
low columns on the user's left and high rows towards the knees.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from seat_sim.core.constants import MATRIX_SIZE, MAX_PRESSURE
from seat_sim.core.types import PostureThresholds


class LateralBalance(str, Enum):
    BALANCED = "balanced"
    LEANING_LEFT = "leaning_left"
    LEANING_RIGHT = "leaning_right"


class SagittalBalance(str, Enum):
    NEUTRAL = "neutral"
    FORWARD_SHIFT = "forward_shift"
    RECLINED = "reclined"


class PeakTier(str, Enum):
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


REPOSITION_ADVICE = (
    "**IMMEDIATE REPOSITIONING:** Peak pressure indicates high risk of ischemia."
)
SUPPORTS_ADVICE = (
    "**Check Supports:** Adjust footrests or armrests to correct lateral lean."
)
SURFACE_AREA_ADVICE = (
    "**Surface Area:** Weight is concentrated in a small area. "
    "Consider a softer cushion material."
)
DEFAULT_ADVICE = (
    "Maintain current posture.",
    "Perform standard pressure relief lift every 30 mins.",
)

# Advisories keep a fixed list number regardless of which others fired
_ADVICE_NUMBERS = {
    REPOSITION_ADVICE: 1,
    SUPPORTS_ADVICE: 2,
    SURFACE_AREA_ADVICE: 3,
}

_LATERAL_LINES = {
    LateralBalance.LEANING_LEFT: (
        "- ⚠️ **Leaning Left:** Significant weight asymmetry detected on the left side."
    ),
    LateralBalance.LEANING_RIGHT: (
        "- ⚠️ **Leaning Right:** Significant weight asymmetry detected on the right side."
    ),
    LateralBalance.BALANCED: "- ✅ **Lateral Balance:** Good (Center).",
}

_SAGITTAL_LINES = {
    SagittalBalance.FORWARD_SHIFT: (
        "- ⚠️ **Forward Shift:** High pressure near knees (Slouching risk)."
    ),
    SagittalBalance.RECLINED: "- ℹ️ **Reclined:** Most weight is on the tailbone/sacrum.",
    SagittalBalance.NEUTRAL: "- ✅ **Sagittal Balance:** Neutral sitting position.",
}

NO_USER_TEXT = "**Status:** No user detected on seat.\n\n*Waiting for pressure data...*"


@dataclass(frozen=True)
class PostureReport:
    """Structured result of a posture analysis.

    Ratios and flags are only meaningful when ``user_detected`` is True.

    Attributes:
        user_detected: Whether enough load was present to analyze
        total_pressure: Sum of readings above the noise floor
        active_cells: Cells above the noise floor
        peak_pressure: Highest reading
        lr_ratio: Fraction of load on the left half
        fb_ratio: Fraction of load on the front half
        lateral: Lateral balance flag
        sagittal: Sagittal balance flag
        peak_tier: Peak pressure class
        recommendations: Advisories in priority order
        generated_at: Optional wall-clock time shown in the heading
    """

    user_detected: bool
    total_pressure: int
    active_cells: int
    peak_pressure: int
    lr_ratio: float = 0.0
    fb_ratio: float = 0.0
    lateral: LateralBalance = LateralBalance.BALANCED
    sagittal: SagittalBalance = SagittalBalance.NEUTRAL
    peak_tier: PeakTier = PeakTier.NORMAL
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    generated_at: Optional[datetime] = None

    @property
    def load_asymmetry(self) -> float:
        """Lateral asymmetry as a percentage (0 = centered)."""
        return abs((self.lr_ratio - 0.5) * 200)

    @property
    def heading(self) -> str:
        if self.generated_at is None:
            return "### Postural Analysis Report"
        return f"### Postural Analysis Report ({self.generated_at.strftime('%H:%M:%S')})"

    def to_markdown(self) -> str:
        """Render the report as markdown text."""
        report = f"{self.heading}\n\n"

        if not self.user_detected:
            return report + NO_USER_TEXT

        lines = [
            "**Postural Alignment:**",
            _LATERAL_LINES[self.lateral],
            _SAGITTAL_LINES[self.sagittal],
            "",
            "**Pressure Distribution:**",
            f"- **Peak Pressure:** {self.peak_pressure}/{MAX_PRESSURE} ({self.peak_tier.value})",
            f"- **Load Asymmetry:** {self.load_asymmetry:.1f}%",
            "",
            "**Recommendations:**",
        ]
        lines.extend(
            f"{_ADVICE_NUMBERS.get(advice, i)}. {advice}"
            for i, advice in enumerate(self.recommendations, start=1)
        )
        return report + "\n".join(lines)

    def __str__(self) -> str:
        return self.to_markdown()


def analyze_posture(
    matrix: ArrayLike,
    thresholds: Optional[PostureThresholds] = None,
    generated_at: Optional[datetime] = None,
) -> PostureReport:
    """Analyze posture from a matrix snapshot.

    Args:
        matrix: Readings of shape (15, 15)
        thresholds: Calibration constants (defaults if None)
        generated_at: Optional time to show in the report heading

    Returns:
        Posture report
    """
    t = thresholds or PostureThresholds()
    grid = np.asarray(matrix, dtype=np.int64)

    loaded = np.where(grid > t.noise_floor, grid, 0)
    total = int(loaded.sum())
    active_cells = int((grid > t.noise_floor).sum())
    peak = int(loaded.max())

    if active_cells < t.min_active_cells or total < t.min_total_pressure:
        return PostureReport(
            user_detected=False,
            total_pressure=total,
            active_cells=active_cells,
            peak_pressure=peak,
            generated_at=generated_at,
        )

    indices = np.arange(grid.shape[0])
    midline = MATRIX_SIZE / 2
    left = int(loaded[:, indices < midline].sum())
    front = int(loaded[indices > midline, :].sum())

    lr_ratio = left / total
    fb_ratio = front / total

    if lr_ratio > t.lateral_left:
        lateral = LateralBalance.LEANING_LEFT
    elif lr_ratio < t.lateral_right:
        lateral = LateralBalance.LEANING_RIGHT
    else:
        lateral = LateralBalance.BALANCED

    if fb_ratio > t.sagittal_forward:
        sagittal = SagittalBalance.FORWARD_SHIFT
    elif fb_ratio < t.sagittal_reclined:
        sagittal = SagittalBalance.RECLINED
    else:
        sagittal = SagittalBalance.NEUTRAL

    if peak > t.peak_critical:
        tier = PeakTier.CRITICAL
    elif peak > t.peak_high:
        tier = PeakTier.HIGH
    else:
        tier = PeakTier.NORMAL

    recommendations = []
    if peak > t.peak_reposition:
        recommendations.append(REPOSITION_ADVICE)
    if lateral is not LateralBalance.BALANCED:
        recommendations.append(SUPPORTS_ADVICE)
    if active_cells < t.concentrated_max_cells and total > t.concentrated_min_total:
        recommendations.append(SURFACE_AREA_ADVICE)
    if not recommendations:
        recommendations.extend(DEFAULT_ADVICE)

    return PostureReport(
        user_detected=True,
        total_pressure=total,
        active_cells=active_cells,
        peak_pressure=peak,
        lr_ratio=lr_ratio,
        fb_ratio=fb_ratio,
        lateral=lateral,
        sagittal=sagittal,
        peak_tier=tier,
        recommendations=tuple(recommendations),
        generated_at=generated_at,
    )


class PostureAnalyzer:
    """Posture analysis bound to a set of calibration thresholds."""

    def __init__(self, thresholds: Optional[PostureThresholds] = None):
        self.thresholds = thresholds or PostureThresholds()

    def analyze(
        self,
        matrix: ArrayLike,
        generated_at: Optional[datetime] = None,
    ) -> PostureReport:
        return analyze_posture(matrix, self.thresholds, generated_at)
