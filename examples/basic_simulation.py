#!/usr/bin/env python3
"""Basic seat pressure simulation example.

This example demonstrates how to:
1. Set up the seat simulator with a configurable scan profile
2. Paint a seated pressure pattern with the brush editor
3. Advance simulated time until sustained pressure raises an alert
4. Print the posture report
5. Optionally save a heatmap and a labelled JSON recording

Usage:
    python examples/basic_simulation.py --lean left --visualize
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seat_sim.core.types import EditMode, SimulatorConfig
from seat_sim.simulation import SeatSimulator


class SimulatedClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms: int = 0):
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger(__name__)


# Ischial tuberosities (sit bones) sit towards the back of the pad
SIT_BONES = {
    "center": [(4, 5), (4, 9)],
    "left": [(4, 3), (4, 6)],
    "right": [(4, 8), (4, 11)],
}
THIGHS = {
    "center": [(9, 5), (9, 9)],
    "left": [(9, 3), (9, 6)],
    "right": [(9, 8), (9, 11)],
}


def paint_seated_user(sim: SeatSimulator, lean: str, dabs: int) -> None:
    """Paint sit-bone hotspots and lighter thigh contact."""
    for center in SIT_BONES[lean]:
        for _ in range(dabs):
            sim.apply_brush(center, EditMode.ADD)
    for center in THIGHS[lean]:
        sim.apply_brush(center, EditMode.ADD)


def main():
    parser = argparse.ArgumentParser(description="Basic seat pressure simulation example")
    parser.add_argument(
        "--lean",
        choices=["center", "left", "right"],
        default="center",
        help="Which way the simulated user leans (default: center)",
    )
    parser.add_argument(
        "--dabs",
        type=int,
        default=10,
        help="Brush applications per sit bone (default: 10)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=7.0,
        help="Simulated sitting time in seconds (default: 7)",
    )
    parser.add_argument(
        "--scan-speed",
        choices=["analysis", "realtime"],
        default="realtime",
        help="Scan cadence profile (default: realtime)",
    )
    parser.add_argument(
        "--record",
        type=Path,
        default=None,
        help="Directory to export a JSON recording to",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Save a heatmap to seat_pressure.png",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()
    logger = setup_logging(args.log_level)

    print("=" * 60)
    print("Seat Pressure Simulator - Basic Example")
    print("=" * 60)

    clock = SimulatedClock(start_ms=1_700_000_000_000)
    config = SimulatorConfig(scan_speed=args.scan_speed, recording_label=f"Lean_{args.lean}")
    sim = SeatSimulator(config=config, clock=clock)

    print(f"\nConfiguration:")
    print(f"  Scan profile: {config.scan_speed.value} ({sim.scanner.interval_ms} ms/tick)")
    print(f"  Static pressure limit: {config.static_time_limit_ms} ms")

    paint_seated_user(sim, args.lean, args.dabs)
    if args.record is not None:
        sim.recorder.start()

    step_ms = 100
    elapsed = 0
    while elapsed < args.duration * 1000:
        clock.advance(step_ms)
        sim.advance(step_ms)
        sim.refresh()
        elapsed += step_ms

    summary = sim.get_summary()
    row, col = sim.scanner.cursor
    mux_a, mux_b = sim.scanner.select_lines()

    print("\n" + "=" * 60)
    print("Results")
    print("=" * 60)
    print(f"  Max pressure: {summary['max_pressure']}/1023")
    print(f"  Active cells: {summary['active_cells']}")
    print(f"  Critical zones: {summary['critical_zones']} ({summary['sustained_zones']} sustained)")
    print(f"  Scan cursor: row {row} (MUX A {mux_a}), col {col} (MUX B {mux_b})")

    cop = sim.center_of_pressure
    if cop is not None:
        print(f"  Center of pressure: ({cop.row:.2f}, {cop.col:.2f})")

    for alert in sim.alerts:
        print(f"  [{alert.alert_type.value.upper()}] {alert.message}")

    print()
    print(sim.analyze_posture().to_markdown())

    if args.record is not None:
        sim.recorder.stop()
        path = sim.recorder.export(args.record, clock())
        logger.info("Recording saved to %s", path)

    if args.visualize:
        from seat_sim.visualization import save_pressure_figure

        save_pressure_figure(
            sim.matrix,
            "seat_pressure.png",
            center_of_pressure=cop,
            scan_cursor=sim.scanner.cursor,
        )
        logger.info("Heatmap saved to seat_pressure.png")


if __name__ == "__main__":
    main()
