"""Pydantic models for API I/O."""

from .dataset import DatasetResponse, NormalizeReportResponse, TeamOptionResponse
from .dashboard import (
    CombinedPointResponse,
    DashboardResponse,
    LegendEntryResponse,
    ScatterPointResponse,
    ScatterResponse,
    SeriesPointResponse,
    SummaryResponse,
    TeamYearStatsResponse,
    YearStatsResponse,
)

__all__ = [
    "CombinedPointResponse",
    "DashboardResponse",
    "DatasetResponse",
    "LegendEntryResponse",
    "NormalizeReportResponse",
    "ScatterPointResponse",
    "ScatterResponse",
    "SeriesPointResponse",
    "SummaryResponse",
    "TeamOptionResponse",
    "TeamYearStatsResponse",
    "YearStatsResponse",
]
