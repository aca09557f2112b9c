"""Immutable dashboard view-model and the controller that swaps it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

from transferviz.aggregate import aggregate_by_year, summarize, team_transfer_counts
from transferviz.filters import FilterCriteria, filter_records
from transferviz.models import SummaryStats, TeamOption, TeamYearStats, TransferRecord, YearStats

from .series import CombinedPoint, SeriesPoint, combined_series, metric_series, team_series


ViewState = Literal["unfiltered", "filtered"]


@dataclass(frozen=True)
class DashboardView:
    """Everything the rendering layer needs for one paint of the dashboard."""

    state: ViewState
    criteria: FilterCriteria
    yearly: tuple[YearStats, ...]
    summary: SummaryStats | None
    total_spend: tuple[SeriesPoint, ...]
    avg_fee: tuple[SeriesPoint, ...]
    transfer_count: tuple[SeriesPoint, ...]
    combined: tuple[CombinedPoint, ...]
    team_stats: tuple[TeamYearStats, ...] | None
    team_options: tuple[TeamOption, ...]

    @property
    def team(self) -> str | None:
        return self.criteria.team

    @property
    def is_placeholder(self) -> bool:
        return self.team_stats is None


def build_view(records: Sequence[TransferRecord], criteria: FilterCriteria | None = None) -> DashboardView:
    """Recompute every chart series for ``records`` under ``criteria``.

    Overview charts and the summary panel always reflect the full record set;
    the team chart is built from the filtered subset, or left as a placeholder
    when no team is selected.
    """

    criteria = criteria or FilterCriteria()
    yearly = aggregate_by_year(records)
    team_stats = None
    if criteria.team:
        selected = filter_records(records, criteria).records
        team_stats = tuple(team_series(selected, criteria.team) or ())
    return DashboardView(
        state="filtered" if criteria.team else "unfiltered",
        criteria=criteria,
        yearly=tuple(yearly),
        summary=summarize(yearly),
        total_spend=tuple(metric_series(yearly, "total_fee")),
        avg_fee=tuple(metric_series(yearly, "avg_fee")),
        transfer_count=tuple(metric_series(yearly, "count")),
        combined=tuple(combined_series(yearly)),
        team_stats=team_stats,
        team_options=tuple(team_transfer_counts(records)),
    )


class DashboardController:
    """Owns the loaded records and the current filter selection.

    ``select_team`` moves to the Filtered state and ``reset`` back to
    Unfiltered; each transition returns a freshly built view.
    """

    def __init__(self, records: Iterable[TransferRecord]) -> None:
        self._records: tuple[TransferRecord, ...] = tuple(records)
        self._criteria = FilterCriteria()
        self._view = build_view(self._records, self._criteria)

    @property
    def records(self) -> tuple[TransferRecord, ...]:
        return self._records

    @property
    def view(self) -> DashboardView:
        return self._view

    def select_team(self, team: str | None, year: int | None = None) -> DashboardView:
        criteria = FilterCriteria.from_params(team, year)
        if not criteria.team:
            return self.reset()
        self._criteria = criteria
        self._view = build_view(self._records, criteria)
        return self._view

    def reset(self) -> DashboardView:
        self._criteria = FilterCriteria()
        self._view = build_view(self._records, self._criteria)
        return self._view
