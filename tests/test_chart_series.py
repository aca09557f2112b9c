import random

import pytest

from transferviz.aggregate import aggregate_by_year
from transferviz.charts import (
    combined_series,
    metric_series,
    normalize_values,
    scatter_legend,
    scatter_points,
    team_series,
)
from transferviz.charts.series import scatter_tooltip
from transferviz.config import TABLEAU10
from transferviz.models import TransferRecord, YearStats


def _records() -> list[TransferRecord]:
    return [
        TransferRecord(year=2020, fee=50, league="Ligue 1", player="B", club_joined="X", club_left="W"),
        TransferRecord(year=2019, fee=80, league="Premier League", player="A", club_joined="X"),
        TransferRecord(year=2019, fee=20, league="Premier League", player="C", club_joined="Y"),
    ]


def test_metric_series_passes_values_through_in_year_order():
    yearly = aggregate_by_year(_records())

    spend = metric_series(yearly, "total_fee")
    count = metric_series(list(reversed(yearly)), "count")

    assert [(point.year, point.value) for point in spend] == [(2019, 100.0), (2020, 50.0)]
    assert [(point.year, point.value) for point in count] == [(2019, 2.0), (2020, 1.0)]


def test_normalize_values_scales_to_max():
    assert normalize_values([25.0, 50.0, 100.0]) == [25.0, 50.0, 100.0]
    assert normalize_values([1.0, 4.0]) == [25.0, 100.0]
    assert normalize_values([]) == []


def test_normalize_values_all_zero_series_maps_to_zero():
    assert normalize_values([0.0, 0.0, 0.0]) == [0.0, 0.0, 0.0]


def test_combined_series_in_range():
    yearly = aggregate_by_year(_records())

    combined = combined_series(yearly)

    assert [point.year for point in combined] == [2019, 2020]
    assert combined[0].spend == 100.0
    assert combined[1].spend == 50.0
    assert combined[0].avg_fee == combined[1].avg_fee == 100.0
    assert combined[0].count == 100.0
    assert combined[1].count == 50.0
    for point in combined:
        for value in (point.spend, point.avg_fee, point.count):
            assert 0.0 <= value <= 100.0


def test_combined_series_zero_spend():
    yearly = [
        YearStats(year=2019, total_fee=0.0, count=2, avg_fee=0.0, max_fee=0.0, min_fee=0.0),
        YearStats(year=2020, total_fee=0.0, count=1, avg_fee=0.0, max_fee=0.0, min_fee=0.0),
    ]

    combined = combined_series(yearly)

    assert [point.spend for point in combined] == [0.0, 0.0]
    assert [point.avg_fee for point in combined] == [0.0, 0.0]
    assert [point.count for point in combined] == [100.0, 50.0]


def test_team_series_placeholder_and_selection():
    assert team_series(_records(), None) is None
    assert team_series(_records(), "") is None

    stats = team_series(_records(), "X")

    assert stats is not None
    assert [(item.year, item.count, item.total_fee) for item in stats] == [(2019, 1, 80.0), (2020, 1, 50.0)]


def test_scatter_points_jitter_within_bounds():
    points = scatter_points(_records(), jitter=0.4, rng=random.Random(7))

    assert len(points) == 3
    for point, record in zip(points, _records()):
        assert point.year == record.year
        assert point.fee == record.fee
        assert abs(point.x - record.year) <= 0.2


def test_scatter_points_without_jitter_sit_on_year():
    points = scatter_points(_records(), jitter=0.0)

    assert [point.x for point in points] == [2020, 2019, 2019]


def test_scatter_points_seeded_rng_is_reproducible():
    first = scatter_points(_records(), rng=random.Random(3))
    second = scatter_points(_records(), rng=random.Random(3))

    assert first == second


def test_scatter_legend_order_and_palette():
    legend = scatter_legend(_records())

    assert [entry.league for entry in legend] == ["Ligue 1", "Premier League"]
    assert [entry.color for entry in legend] == list(TABLEAU10[:2])


def test_scatter_legend_cycles_palette():
    records = [TransferRecord(year=2020, fee=1, league=f"League {index}") for index in range(12)]

    legend = scatter_legend(records)

    assert legend[10].color == TABLEAU10[0]
    assert legend[11].color == TABLEAU10[1]


def test_scatter_tooltip_falls_back_to_na():
    point = scatter_points(_records(), jitter=0.0)[1]

    tooltip = scatter_tooltip(point)

    assert "<strong>A</strong>" in tooltip
    assert "€80M (2019)" in tooltip
    assert "<strong>From:</strong> N/A" in tooltip
    assert "<strong>To:</strong> X" in tooltip
    assert "Premier League" in tooltip


@pytest.mark.parametrize("jitter", [0.1, 1.0])
def test_scatter_points_default_rng(jitter):
    points = scatter_points(_records(), jitter=jitter)

    assert all(abs(point.x - point.year) <= jitter / 2 for point in points)
