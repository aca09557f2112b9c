"""Per-year and per-team aggregation of transfer records."""

from .stats import (
    aggregate_by_team_year,
    aggregate_by_year,
    aggregate_team,
    group_by,
    league_order,
    summarize,
    team_transfer_counts,
)

__all__ = [
    "aggregate_by_team_year",
    "aggregate_by_year",
    "aggregate_team",
    "group_by",
    "league_order",
    "summarize",
    "team_transfer_counts",
]
