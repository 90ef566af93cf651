"""2D pressure map visualization."""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle
from numpy.typing import ArrayLike

from seat_sim.core.constants import MAX_PRESSURE, PRESSURE_THRESHOLD_CRITICAL
from seat_sim.core.types import Point

EMPTY_SEAT_RGB = (20, 20, 25)


def thermography_rgb(value: float) -> tuple[int, int, int]:
    """Thermography colour ramp for a single reading.

    Low readings fade from black to blue, mid readings run through green to
    yellow, and high readings deepen from pale red to saturated red.

    Args:
        value: Raw ADC reading

    Returns:
        (r, g, b) tuple in 0-255
    """
    if value == 0:
        return EMPTY_SEAT_RGB

    normalized = min(value / MAX_PRESSURE, 1.0)

    if normalized < 0.2:
        intensity = normalized * 5
        rgb = (0, 0, intensity * 150 + 50)
    elif normalized < 0.5:
        intensity = (normalized - 0.2) * 3.33
        rgb = (0, intensity * 255, 200 - intensity * 100)
    elif normalized < 0.8:
        intensity = (normalized - 0.5) * 3.33
        rgb = (intensity * 255, 255 - intensity * 50, 0)
    else:
        intensity = (normalized - 0.8) * 5
        rgb = (255, 200 - intensity * 200, 200 - intensity * 200)

    return tuple(int(np.clip(np.floor(c), 0, 255)) for c in rgb)


def thermography_color(value: float) -> str:
    """CSS ``rgb(r, g, b)`` colour string for a reading."""
    r, g, b = thermography_rgb(value)
    return f"rgb({r}, {g}, {b})"


def thermography_colormap(steps: int = MAX_PRESSURE + 1) -> mcolors.ListedColormap:
    """Matplotlib colormap sampled from the thermography ramp.

    Args:
        steps: Number of samples across the ADC range

    Returns:
        Listed colormap spanning 0..1023
    """
    values = np.linspace(0, MAX_PRESSURE, steps)
    colors = [tuple(c / 255 for c in thermography_rgb(v)) for v in values]
    return mcolors.ListedColormap(colors, name="thermography")


def create_pressure_heatmap(
    matrix: ArrayLike,
    center_of_pressure: Optional[Point] = None,
    scan_cursor: Optional[tuple[int, int]] = None,
    ax: Optional[Axes] = None,
    show_colorbar: bool = True,
    title: Optional[str] = None,
) -> tuple[Figure, Axes]:
    """Create 2D heatmap of the seat pressure matrix.

    Args:
        matrix: Readings of shape (15, 15)
        center_of_pressure: Optional centroid marker
        scan_cursor: Optional (row, col) of the currently scanned sensor
        ax: Optional matplotlib axes (creates new figure if None)
        show_colorbar: Whether to show colorbar
        title: Plot title

    Returns:
        (figure, axes) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    grid = np.asarray(matrix)

    im = ax.imshow(
        grid,
        cmap=thermography_colormap(),
        origin="upper",
        vmin=0,
        vmax=MAX_PRESSURE,
        interpolation="nearest",
    )

    if show_colorbar:
        fig.colorbar(im, ax=ax, label="ADC reading (0-1023)")

    if center_of_pressure is not None:
        ax.plot(
            center_of_pressure.col,
            center_of_pressure.row,
            marker="+",
            markersize=16,
            markeredgewidth=2,
            color="white",
            label="CoP",
        )

    if scan_cursor is not None:
        row, col = scan_cursor
        ax.add_patch(
            Rectangle(
                (col - 0.5, row - 0.5),
                1,
                1,
                fill=False,
                edgecolor="cyan",
                linewidth=1.5,
            )
        )

    ax.set_xlabel("Column (Left → Right)")
    ax.set_ylabel("Row (Back → Front)")

    if title:
        ax.set_title(title)
    else:
        critical = int((grid > PRESSURE_THRESHOLD_CRITICAL).sum())
        ax.set_title(
            f"Seat Pressure Map\nPeak: {int(grid.max())}/{MAX_PRESSURE}, "
            f"Critical zones: {critical}"
        )

    return fig, ax


def save_pressure_figure(
    matrix: ArrayLike,
    filepath: str,
    dpi: int = 150,
    **kwargs,
) -> None:
    """Save pressure heatmap to file.

    Args:
        matrix: Readings of shape (15, 15)
        filepath: Output file path
        dpi: Figure resolution
        **kwargs: Additional arguments for create_pressure_heatmap
    """
    fig, ax = create_pressure_heatmap(matrix, **kwargs)
    fig.savefig(filepath, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
