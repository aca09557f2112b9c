"""Configuration helpers for chart layout and runtime settings."""

from .charts import ChartSpec, DASHBOARD_CHARTS, TABLEAU10, TEAM_PLACEHOLDER, get_chart_spec, iter_chart_specs
from .settings import Settings, load_settings

__all__ = [
    "ChartSpec",
    "DASHBOARD_CHARTS",
    "Settings",
    "TABLEAU10",
    "TEAM_PLACEHOLDER",
    "get_chart_spec",
    "iter_chart_specs",
    "load_settings",
]
