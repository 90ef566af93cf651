"""Interactive figures using Plotly."""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from seat_sim.core.constants import MAX_PRESSURE
from seat_sim.core.types import Point, RecordedFrame
from seat_sim.metrics.pressure_metrics import compute_center_of_pressure
from seat_sim.visualization.pressure_map import thermography_color


def thermography_colorscale(steps: int = 11) -> list[list]:
    """Plotly colorscale sampled from the thermography ramp."""
    return [
        [i / (steps - 1), thermography_color(i / (steps - 1) * MAX_PRESSURE)]
        for i in range(steps)
    ]


def create_plotly_heatmap(
    matrix: ArrayLike,
    center_of_pressure: Optional[Point] = None,
    title: str = "Seat Pressure",
):
    """Create Plotly heatmap figure.

    Args:
        matrix: Readings of shape (15, 15)
        center_of_pressure: Optional centroid marker
        title: Plot title

    Returns:
        Plotly figure
    """
    import plotly.graph_objects as go

    grid = np.asarray(matrix)

    fig = go.Figure(
        data=go.Heatmap(
            z=grid,
            zmin=0,
            zmax=MAX_PRESSURE,
            colorscale=thermography_colorscale(),
            colorbar=dict(title="ADC"),
        )
    )

    if center_of_pressure is not None:
        fig.add_trace(
            go.Scatter(
                x=[center_of_pressure.col],
                y=[center_of_pressure.row],
                mode="markers",
                marker=dict(symbol="cross", size=14, color="white"),
                name="CoP",
            )
        )

    fig.update_layout(
        title=dict(text=f"{title}<br>Peak: {int(grid.max())}/{MAX_PRESSURE}", x=0.5),
        xaxis_title="Column",
        yaxis_title="Row (Back → Front)",
        yaxis=dict(autorange="reversed"),
    )

    return fig


def create_plotly_cop_trace(
    frames: list[RecordedFrame],
    title: str = "Center of Pressure Trajectory",
):
    """Plot the center-of-pressure path across recorded frames.

    Frames without a center of pressure (empty seat) are skipped.

    Args:
        frames: Recorded frames in capture order
        title: Plot title

    Returns:
        Plotly figure
    """
    import plotly.graph_objects as go

    rows, cols, times = [], [], []
    for frame in frames:
        cop = compute_center_of_pressure(frame.matrix)
        if cop is None:
            continue
        rows.append(cop.row)
        cols.append(cop.col)
        times.append(frame.timestamp)

    fig = go.Figure(
        data=go.Scatter(
            x=cols,
            y=rows,
            mode="lines+markers",
            marker=dict(color=times, colorscale="Viridis", showscale=True),
            name="CoP",
        )
    )

    fig.update_layout(
        title=dict(text=title, x=0.5),
        xaxis=dict(title="Column", range=[-0.5, 14.5]),
        yaxis=dict(title="Row", range=[14.5, -0.5]),
    )

    return fig
