"""Simulation module for orchestrating the seat pad simulator."""

from seat_sim.simulation.simulator import SeatSimulator, system_clock
from seat_sim.simulation.scan_sequencer import ScanSequencer, to_select_bits
from seat_sim.simulation.recorder import FrameRecorder, load_frames

__all__ = [
    "SeatSimulator",
    "system_clock",
    "ScanSequencer",
    "to_select_bits",
    "FrameRecorder",
    "load_frames",
]
