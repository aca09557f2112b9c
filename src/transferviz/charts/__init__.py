"""Chart data builders, the dashboard view-model and plotly rendering."""

from .series import (
    CombinedPoint,
    LegendEntry,
    ScatterPoint,
    SeriesPoint,
    combined_series,
    metric_series,
    normalize_values,
    scatter_legend,
    scatter_points,
    team_series,
)
from .view import DashboardController, DashboardView, build_view

__all__ = [
    "CombinedPoint",
    "DashboardController",
    "DashboardView",
    "LegendEntry",
    "ScatterPoint",
    "SeriesPoint",
    "build_view",
    "combined_series",
    "metric_series",
    "normalize_values",
    "scatter_legend",
    "scatter_points",
    "team_series",
]
