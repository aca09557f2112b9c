import random

import pytest

from transferviz.api.pages import render_dashboard_page, render_error_page, render_scatter_page, render_summary
from transferviz.charts import build_view, scatter_legend, scatter_points
from transferviz.charts.render import (
    PLOTLY_CDN,
    combined_figure,
    dashboard_figures,
    figure_html,
    line_figure,
    metric_tooltip,
    scatter_figure,
    team_figure,
)
from transferviz.charts.series import SeriesPoint
from transferviz.config import TEAM_PLACEHOLDER
from transferviz.filters import FilterCriteria
from transferviz.ingest import NormalizeReport
from transferviz.models import TransferRecord


def _records() -> list[TransferRecord]:
    return [
        TransferRecord(year=2019, fee=80, league="A", player="P1", club_joined="X", club_left="Z"),
        TransferRecord(year=2019, fee=20, league="A", player="P2", club_joined="Y"),
        TransferRecord(year=2020, fee=50, league="B", player="P3", club_joined="X"),
    ]


def test_metric_tooltips():
    point = SeriesPoint(year=2019, value=100.0)

    assert metric_tooltip("total_spend", point) == "Year: 2019<br>Total Spend: €100.0M"
    assert metric_tooltip("avg_fee", SeriesPoint(2019, 12.345)) == "Year: 2019<br>Avg Fee: €12.35M"
    assert metric_tooltip("transfer_count", SeriesPoint(2019, 3.0)) == "Year: 2019<br>Transfers: 3"
    with pytest.raises(KeyError):
        metric_tooltip("combined", point)


def test_line_figure_uses_chart_spec():
    fig = line_figure("total_spend", [SeriesPoint(2019, 100.0), SeriesPoint(2020, 50.0)])

    assert list(fig.data[0].x) == [2019, 2020]
    assert list(fig.data[0].y) == [100.0, 50.0]
    assert fig.layout.width == 600
    assert fig.layout.title.text == "Total Spending"


def test_combined_figure_has_three_normalized_traces():
    view = build_view(_records())

    fig = combined_figure(view.combined)

    assert [trace.name for trace in fig.data] == ["Total Spend", "Average Fee", "Transfer Count"]
    assert tuple(fig.layout.yaxis.range) == (0, 100)
    for trace in fig.data:
        assert max(trace.y) == pytest.approx(100.0)


def test_team_figure_placeholder_without_selection():
    fig = team_figure(None, None)

    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == TEAM_PLACEHOLDER


def test_team_figure_for_selected_team():
    view = build_view(_records(), FilterCriteria(team="X"))

    fig = team_figure(view.team, view.team_stats)

    assert fig.layout.title.text == "Transfer Trends: X"
    assert list(fig.data[0].y) == [1, 1]
    assert not fig.layout.annotations


def test_dashboard_figures_keys():
    figures = dashboard_figures(build_view(_records()))

    assert list(figures) == ["total_spend", "avg_fee", "transfer_count", "combined", "team_transfers"]


def test_scatter_figure_one_trace_per_league():
    records = _records()
    points = scatter_points(records, rng=random.Random(1))

    fig = scatter_figure(points, scatter_legend(records))

    assert [trace.name for trace in fig.data] == ["A", "B"]
    assert len(fig.data[0].x) == 2
    assert fig.layout.legend.title.text == "League"


def test_figure_html_uses_div_id_without_bundled_js():
    html = figure_html(line_figure("avg_fee", [SeriesPoint(2019, 1.0)]), div_id="chart-avg-fee")

    assert 'id="chart-avg-fee"' in html
    assert "<html" not in html


def test_render_summary_cards():
    view = build_view(_records())

    html = render_summary(view.summary)

    assert "Total Spending" in html
    assert "€150M" in html
    assert "2019" in html
    assert "€75.0M" in html
    assert "No transfers" in render_summary(None)


def test_dashboard_page_contains_controls_and_charts():
    view = build_view(_records(), FilterCriteria(team="X"))

    html = render_dashboard_page(view, dataset_id="abc", dataset_name="transfers.csv", uploads=[("abc", "transfers.csv")])

    assert PLOTLY_CDN in html
    assert 'id="team-select"' in html
    assert '<option value="X" selected>X (2)</option>' in html
    assert 'id="reset-filters" href="/ui?dataset=abc"' in html
    assert 'id="chart-team-transfers"' in html
    assert "Recent uploads" in html


def test_standalone_dashboard_page_has_no_server_controls():
    report = NormalizeReport(total_rows=4, kept_rows=3, dropped_rows=1)

    html = render_dashboard_page(
        build_view(_records()),
        dataset_id="cli",
        dataset_name="transfers.csv",
        report=report,
        standalone=True,
    )

    assert 'id="team-select"' not in html
    assert 'enctype="multipart/form-data"' not in html
    assert "3 of 4 rows loaded (1 skipped)" in html


def test_scatter_page_and_error_page():
    records = _records()
    html = render_scatter_page(scatter_points(records), scatter_legend(records), dataset_name="<b>x</b>.csv")

    assert 'id="chart"' in html
    assert "&lt;b&gt;x&lt;/b&gt;.csv" in html

    error = render_error_page("Something <broke>")
    assert 'class="notice error" id="loading"' in error
    assert "Something &lt;broke&gt;" in error
    assert PLOTLY_CDN not in error
