"""Scan sequencer simulating the multiplexer address sweep."""

import logging
from typing import Callable, Optional, Union

from seat_sim.core.constants import MATRIX_SIZE, MUX_SELECT_LINES
from seat_sim.core.types import ScanSpeed

logger = logging.getLogger(__name__)


def to_select_bits(channel: int) -> str:
    """Binary select-line levels for a multiplexer channel, MSB first."""
    return format(channel, f"0{MUX_SELECT_LINES}b")


class ScanSequencer:
    """Round-robin sweep over sensor rows and columns.

    MUX A drives the row lines and MUX B reads the column lines. Each tick
    advances the column; after the last column the row advances. The
    cursor is independent of the pressure readings and exists to drive
    visualization of the address currently being read.

    Attributes:
        profile: Current scan cadence profile
    """

    def __init__(self, profile: Union[ScanSpeed, str] = ScanSpeed.REALTIME):
        """Initialize scan sequencer.

        Args:
            profile: Scan cadence profile ('analysis' or 'realtime')
        """
        self.profile = ScanSpeed(profile)
        self._row = 0
        self._col = 0
        self._scanning = True
        self._pending_ms = 0.0
        self._tick_count = 0

        self._on_tick: Optional[Callable[[int, int], None]] = None

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def cursor(self) -> tuple[int, int]:
        """Currently addressed sensor (row, col)."""
        return (self._row, self._col)

    @property
    def interval_ms(self) -> int:
        """Tick interval of the current profile."""
        return self.profile.interval_ms

    @property
    def is_scanning(self) -> bool:
        return self._scanning

    @property
    def tick_count(self) -> int:
        """Ticks performed since the last reset."""
        return self._tick_count

    def set_profile(self, profile: Union[ScanSpeed, str]) -> None:
        """Switch cadence profile.

        Takes effect on the next scheduled tick and keeps the cursor.

        Args:
            profile: New profile
        """
        self.profile = ScanSpeed(profile)
        logger.debug("Scan profile set to %s (%d ms/tick)", self.profile.value, self.interval_ms)

    def start(self) -> None:
        """Resume scheduling ticks."""
        self._scanning = True

    def stop(self) -> None:
        """Stop scheduling ticks."""
        self._scanning = False
        self._pending_ms = 0.0

    def tick(self) -> tuple[int, int]:
        """Advance the cursor by one address.

        Returns:
            New cursor position
        """
        self._col += 1
        if self._col > MATRIX_SIZE - 1:
            self._col = 0
            self._row = (self._row + 1) % MATRIX_SIZE

        self._tick_count += 1
        if self._on_tick:
            self._on_tick(self._row, self._col)

        return self.cursor

    def advance(self, elapsed_ms: float) -> int:
        """Run every tick that falls within an elapsed time span.

        The interval is read before each tick, so a profile switch applies
        from the next scheduled tick onward.

        Args:
            elapsed_ms: Wall time elapsed since the previous call

        Returns:
            Number of ticks performed
        """
        if not self._scanning:
            return 0

        self._pending_ms += elapsed_ms
        ticks = 0
        while self._pending_ms >= self.interval_ms:
            self._pending_ms -= self.interval_ms
            self.tick()
            ticks += 1

        return ticks

    def reset(self) -> None:
        """Return cursor to (0, 0)."""
        self._row = 0
        self._col = 0
        self._pending_ms = 0.0
        self._tick_count = 0

    def select_lines(self) -> tuple[str, str]:
        """Select-line levels for both multiplexers.

        Returns:
            (MUX A row bits, MUX B column bits), MSB first
        """
        return (to_select_bits(self._row), to_select_bits(self._col))

    def set_tick_callback(self, callback: Callable[[int, int], None]) -> None:
        """Set callback for ticks.

        Args:
            callback: Function called with (row, col) after each tick
        """
        self._on_tick = callback
