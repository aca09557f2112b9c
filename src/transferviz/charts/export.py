"""CSV export helpers for aggregated series."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from transferviz.models import TeamYearStats, YearStats


YEARLY_HEADERS: tuple[str, ...] = ("year", "total_fee", "count", "avg_fee", "max_fee", "min_fee")


def export_yearly_to_csv(yearly: Sequence[YearStats]) -> str:
    """Per-year aggregate as CSV, one row per year, ascending.

    ``TeamYearStats`` rows get a leading ``team`` column.
    """

    with_team = bool(yearly) and all(isinstance(item, TeamYearStats) for item in yearly)
    headers = (("team",) if with_team else ()) + YEARLY_HEADERS

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(headers)
    for item in sorted(yearly, key=lambda stats: stats.year):
        row = [getattr(item, header) for header in headers]
        writer.writerow(row)
    return buffer.getvalue()


__all__ = [
    "YEARLY_HEADERS",
    "export_yearly_to_csv",
]
