"""Helpers for narrowing transfer records to a selected team."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from transferviz.models import TransferRecord


@dataclass(frozen=True)
class FilterCriteria:
    """Current filter selection. ``team=None`` means nothing is selected."""

    team: str | None = None
    year: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.team and self.year is None

    @classmethod
    def from_params(cls, team: str | None, year: int | None = None) -> "FilterCriteria":
        team_value = team.strip() if team else None
        return cls(team=team_value or None, year=year)


@dataclass(frozen=True)
class FilterResult:
    records: tuple[TransferRecord, ...]
    available_records: int
    selected_records: int


def _passes_criteria(record: TransferRecord, criteria: FilterCriteria) -> bool:
    if criteria.team and record.club_joined != criteria.team:
        return False
    if criteria.year is not None and record.year != criteria.year:
        return False
    return True


def filter_records(records: Iterable[TransferRecord], criteria: FilterCriteria) -> FilterResult:
    pool: Sequence[TransferRecord] = tuple(records)
    if criteria.is_empty:
        selected = tuple(pool)
    else:
        selected = tuple(record for record in pool if _passes_criteria(record, criteria))
    return FilterResult(
        records=selected,
        available_records=len(pool),
        selected_records=len(selected),
    )
