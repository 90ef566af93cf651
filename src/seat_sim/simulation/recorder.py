"""In-memory frame recorder for labelled training data export."""

import json
import logging
import re
from pathlib import Path
from typing import Union

from numpy.typing import ArrayLike

from seat_sim.core.constants import DEFAULT_RECORDING_LABEL, RECORDING_INTERVAL_MS
from seat_sim.core.types import RecordedFrame
from seat_sim.matrix.store import freeze, normalize_matrix

logger = logging.getLogger(__name__)


class FrameRecorder:
    """Samples matrix snapshots into an append-only buffer.

    Frames are captured at a fixed interval while recording and can be
    exported as a pretty-printed JSON array of
    ``{"timestamp", "label", "matrix"}`` objects.

    Attributes:
        label: Posture label attached to new frames
        interval_ms: Sampling period in milliseconds
    """

    def __init__(
        self,
        label: str = DEFAULT_RECORDING_LABEL,
        interval_ms: float = RECORDING_INTERVAL_MS,
    ):
        """Initialize frame recorder.

        Args:
            label: Posture label for captured frames
            interval_ms: Sampling period in milliseconds
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self.label = label
        self.interval_ms = interval_ms
        self._frames: list[RecordedFrame] = []
        self._recording = False
        self._pending_ms = 0.0

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def frames(self) -> list[RecordedFrame]:
        """Captured frames in capture order."""
        return self._frames.copy()

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def duration_seconds(self) -> float:
        """Recorded duration implied by the sampling period."""
        return self.frame_count * self.interval_ms / 1000.0

    def start(self) -> None:
        """Start recording."""
        self._recording = True
        self._pending_ms = 0.0
        logger.info("Recording started with label %r", self.label)

    def stop(self) -> None:
        """Stop recording; the buffer is kept."""
        self._recording = False
        logger.info("Recording stopped, %d frames buffered", self.frame_count)

    def set_label(self, label: str) -> None:
        """Change the label used for subsequent frames."""
        self.label = label

    def capture(self, matrix: ArrayLike, now: int) -> RecordedFrame:
        """Append one frame regardless of recording state.

        Args:
            matrix: Readings of shape (15, 15)
            now: Capture time in epoch milliseconds

        Returns:
            The captured frame
        """
        frame = RecordedFrame(
            timestamp=int(now),
            label=self.label,
            matrix=freeze(normalize_matrix(matrix)),
        )
        self._frames.append(frame)
        return frame

    def sample(self, matrix: ArrayLike, elapsed_ms: float, now: int) -> int:
        """Capture frames for each sampling period within an elapsed span.

        Each frame is stamped with the end time of its own sampling period.

        Args:
            matrix: Current readings
            elapsed_ms: Time elapsed since the previous call
            now: Current time in epoch milliseconds

        Returns:
            Number of frames captured
        """
        if not self._recording:
            return 0

        self._pending_ms += elapsed_ms
        captured = 0
        while self._pending_ms >= self.interval_ms:
            self._pending_ms -= self.interval_ms
            self.capture(matrix, now - self._pending_ms)
            captured += 1

        return captured

    def clear(self) -> None:
        """Drop all buffered frames."""
        self._frames.clear()

    def to_json(self) -> str:
        """Serialize the buffer as pretty-printed JSON."""
        return json.dumps([f.to_dict() for f in self._frames], indent=2)

    def export_filename(self, now: int) -> str:
        """Download filename for an export made at a given time."""
        safe_label = re.sub(r"[^A-Za-z0-9_.-]", "_", self.label)
        return f"training_data_{safe_label}_{int(now)}.json"

    def export(self, directory: Union[str, Path], now: int) -> Path:
        """Write the buffer to a JSON file.

        Args:
            directory: Output directory (created if missing)
            now: Export time in epoch milliseconds, used in the filename

        Returns:
            Path to written file

        Raises:
            ValueError: If there are no frames to export
        """
        if not self._frames:
            raise ValueError("No frames recorded")

        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        filepath = directory / self.export_filename(now)

        with open(filepath, "w") as f:
            f.write(self.to_json())

        logger.info("Exported %d frames to %s", self.frame_count, filepath)
        return filepath


def load_frames(filepath: Union[str, Path]) -> list[RecordedFrame]:
    """Load frames from an exported JSON file.

    Args:
        filepath: Path to export file

    Returns:
        Recorded frames in file order

    Raises:
        ValueError: If the file is not a frame list or a matrix is malformed
    """
    with open(filepath, "r") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of frames in {filepath}")

    frames = []
    for i, item in enumerate(data):
        try:
            matrix = normalize_matrix(item["matrix"])
            frames.append(
                RecordedFrame(
                    timestamp=int(item["timestamp"]),
                    label=str(item["label"]),
                    matrix=freeze(matrix),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid frame {i} in {filepath}: {e}") from e

    return frames
