"""Group-by summaries over normalized transfer records."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Hashable, Iterable, List, Sequence, TypeVar

from transferviz.models import SummaryStats, TeamOption, TeamYearStats, TransferRecord, YearStats


K = TypeVar("K", bound=Hashable)


def group_by(records: Iterable[TransferRecord], key: Callable[[TransferRecord], K]) -> Dict[K, List[TransferRecord]]:
    """Bucket records by ``key`` preserving first-appearance order of keys."""

    groups: Dict[K, List[TransferRecord]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def _group_stats(group: Sequence[TransferRecord]) -> dict[str, float | int]:
    fees = [record.fee for record in group]
    total = sum(fees)
    count = len(fees)
    return {
        "total_fee": total,
        "count": count,
        "avg_fee": total / count,
        "max_fee": max(fees),
        "min_fee": min(fees),
    }


def aggregate_by_year(records: Iterable[TransferRecord]) -> List[YearStats]:
    groups = group_by(records, lambda record: record.year)
    return [
        YearStats(year=year, **_group_stats(group))
        for year, group in sorted(groups.items())
    ]


def aggregate_by_team_year(records: Iterable[TransferRecord]) -> Dict[str, List[TeamYearStats]]:
    """Per-team yearly aggregates, keyed by ``club_joined``."""

    groups = group_by(records, lambda record: (record.club_joined, record.year))
    by_team: Dict[str, List[TeamYearStats]] = {}
    for (team, year), group in sorted(groups.items(), key=lambda item: item[0][1]):
        by_team.setdefault(team, []).append(
            TeamYearStats(team=team, year=year, **_group_stats(group))
        )
    return by_team


def aggregate_team(records: Iterable[TransferRecord], team: str) -> List[TeamYearStats]:
    team_records = [record for record in records if record.club_joined == team]
    return aggregate_by_team_year(team_records).get(team, [])


def summarize(yearly: Sequence[YearStats]) -> SummaryStats | None:
    """Reduce the per-year aggregate to the four headline numbers.

    Returns ``None`` for an empty aggregate. The peak year is the first year
    whose total spend is strictly greater than every earlier year, so ties
    resolve to the earliest year.
    """

    if not yearly:
        return None
    total_spend = sum(item.total_fee for item in yearly)
    peak = yearly[0]
    for item in yearly[1:]:
        if item.total_fee > peak.total_fee:
            peak = item
    return SummaryStats(
        total_spend=total_spend,
        peak_year=peak.year,
        total_transfers=sum(item.count for item in yearly),
        avg_annual_spend=total_spend / len(yearly),
        years=len(yearly),
    )


def team_transfer_counts(records: Iterable[TransferRecord]) -> List[TeamOption]:
    """Distinct ``club_joined`` values by descending transfer count.

    Records without a joining club are skipped. Ties keep the order in which
    teams first appear in ``records``.
    """

    counts = Counter(record.club_joined for record in records if record.club_joined)
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [TeamOption(team=team, count=count) for team, count in ordered]


def league_order(records: Iterable[TransferRecord]) -> List[str]:
    return list(group_by(records, lambda record: record.league))
