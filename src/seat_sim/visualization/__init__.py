"""Visualization module for seat pressure heatmaps."""

from seat_sim.visualization.pressure_map import (
    thermography_rgb,
    thermography_color,
    thermography_colormap,
    create_pressure_heatmap,
    save_pressure_figure,
)
from seat_sim.visualization.dashboard import (
    thermography_colorscale,
    create_plotly_heatmap,
    create_plotly_cop_trace,
)

__all__ = [
    # Matplotlib visualizations
    "thermography_rgb",
    "thermography_color",
    "thermography_colormap",
    "create_pressure_heatmap",
    "save_pressure_figure",
    # Plotly
    "thermography_colorscale",
    "create_plotly_heatmap",
    "create_plotly_cop_trace",
]
