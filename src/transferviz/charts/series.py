"""Shape aggregates into the series each chart consumes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from html import escape
from typing import Iterable, List, Literal, Sequence

from transferviz.aggregate import aggregate_team, league_order
from transferviz.config import TABLEAU10
from transferviz.models import TeamYearStats, TransferRecord, YearStats


logger = logging.getLogger(__name__)

Metric = Literal["total_fee", "avg_fee", "count", "max_fee", "min_fee"]


@dataclass(frozen=True)
class SeriesPoint:
    year: int
    value: float


@dataclass(frozen=True)
class CombinedPoint:
    """One year of the combined view, every metric rescaled to 0-100."""

    year: int
    spend: float
    avg_fee: float
    count: float


@dataclass(frozen=True)
class ScatterPoint:
    year: int
    x: float
    fee: float
    league: str
    player: str
    club_joined: str
    club_left: str


@dataclass(frozen=True)
class LegendEntry:
    league: str
    color: str


def metric_series(yearly: Sequence[YearStats], metric: Metric) -> List[SeriesPoint]:
    ordered = sorted(yearly, key=lambda item: item.year)
    return [SeriesPoint(year=item.year, value=float(getattr(item, metric))) for item in ordered]


def normalize_values(values: Sequence[float]) -> List[float]:
    """Rescale ``values`` so the maximum maps to 100.

    A series whose maximum is zero (all zeros) maps to all zeros rather than
    dividing by zero.
    """

    if not values:
        return []
    peak = max(values)
    if peak == 0:
        logger.debug("All-zero series of %d values normalized to zeros", len(values))
        return [0.0 for _ in values]
    return [value / peak * 100 for value in values]


def combined_series(yearly: Sequence[YearStats]) -> List[CombinedPoint]:
    ordered = sorted(yearly, key=lambda item: item.year)
    spend = normalize_values([item.total_fee for item in ordered])
    avg = normalize_values([item.avg_fee for item in ordered])
    count = normalize_values([float(item.count) for item in ordered])
    return [
        CombinedPoint(year=item.year, spend=s, avg_fee=a, count=c)
        for item, s, a, c in zip(ordered, spend, avg, count)
    ]


def scatter_points(
    records: Iterable[TransferRecord],
    *,
    jitter: float = 0.35,
    rng: random.Random | None = None,
) -> List[ScatterPoint]:
    """One point per transfer, spread horizontally around its year.

    ``jitter`` is the full width of the spread in years; each point is offset
    by ``(random() - 0.5) * jitter``.
    """

    rng = rng or random.Random()
    points: List[ScatterPoint] = []
    for record in records:
        offset = (rng.random() - 0.5) * jitter if jitter else 0.0
        points.append(
            ScatterPoint(
                year=record.year,
                x=record.year + offset,
                fee=record.fee,
                league=record.league,
                player=record.player,
                club_joined=record.club_joined,
                club_left=record.club_left,
            )
        )
    return points


def scatter_legend(records: Iterable[TransferRecord], palette: Sequence[str] = TABLEAU10) -> List[LegendEntry]:
    """Leagues in first-appearance order, colours cycling through ``palette``."""

    return [
        LegendEntry(league=league, color=palette[index % len(palette)])
        for index, league in enumerate(league_order(records))
    ]


def scatter_tooltip(point: ScatterPoint) -> str:
    return (
        f"<strong>{escape(point.player)}</strong><br>"
        f"€{point.fee:g}M ({point.year})<br>"
        f"<strong>From:</strong> {escape(point.club_left or 'N/A')}<br>"
        f"<strong>To:</strong> {escape(point.club_joined or 'N/A')}<br>"
        f"<strong>League:</strong> {escape(point.league)}"
    )


def team_series(records: Iterable[TransferRecord], team: str | None) -> List[TeamYearStats] | None:
    """Yearly stats for the team chart, or ``None`` when no team is selected."""

    if not team:
        return None
    return aggregate_team(records, team)
