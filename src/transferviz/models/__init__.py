"""Canonical transfer models shared across ingestion, aggregation and charts."""

from .transfer import SummaryStats, TeamOption, TeamYearStats, TransferRecord, YearStats

__all__ = [
    "SummaryStats",
    "TeamOption",
    "TeamYearStats",
    "TransferRecord",
    "YearStats",
]
