"""plotly figures for the dashboard and scatter views."""

from __future__ import annotations

from html import escape
from typing import Dict, List, Sequence

import plotly.graph_objects as go
import plotly.io as pio

from transferviz.config import TEAM_PLACEHOLDER, ChartSpec, get_chart_spec
from transferviz.models import TeamYearStats

from .series import CombinedPoint, LegendEntry, ScatterPoint, SeriesPoint, scatter_tooltip
from .view import DashboardView


PLOTLY_CDN = "https://cdn.plot.ly/plotly-2.32.0.min.js"

_COMBINED_TRACES = (
    ("spend", "Total Spend", "total_spend"),
    ("avg_fee", "Average Fee", "avg_fee"),
    ("count", "Transfer Count", "transfer_count"),
)


def metric_tooltip(key: str, point: SeriesPoint) -> str:
    if key == "total_spend":
        return f"Year: {point.year}<br>Total Spend: €{point.value:.1f}M"
    if key == "avg_fee":
        return f"Year: {point.year}<br>Avg Fee: €{point.value:.2f}M"
    if key == "transfer_count":
        return f"Year: {point.year}<br>Transfers: {point.value:.0f}"
    raise KeyError(f"No tooltip format for chart {key!r}")


def team_tooltip(stats: TeamYearStats) -> str:
    return (
        f"Year: {stats.year}<br>Transfers: {stats.count}<br>"
        f"Total Spend: €{stats.total_fee:.0f}M<br>Avg Fee: €{stats.avg_fee:.2f}M"
    )


def _base_layout(fig: go.Figure, spec: ChartSpec, *, title: str | None = None) -> go.Figure:
    fig.update_layout(
        title=title or spec.title,
        width=spec.width,
        height=spec.height,
        xaxis_title=spec.x_label,
        yaxis_title=spec.y_label,
        xaxis=dict(tickformat="d"),
        yaxis=dict(rangemode="tozero"),
        template="plotly_white",
        margin=dict(l=60, r=30, t=50, b=50),
    )
    return fig


def line_figure(key: str, points: Sequence[SeriesPoint]) -> go.Figure:
    spec = get_chart_spec(key)
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[point.year for point in points],
            y=[point.value for point in points],
            mode="lines+markers",
            name=spec.title,
            line=dict(color=spec.color, width=2),
            marker=dict(size=8),
            text=[metric_tooltip(key, point) for point in points],
            hovertemplate="%{text}<extra></extra>",
        )
    )
    return _base_layout(fig, spec)


def combined_figure(points: Sequence[CombinedPoint]) -> go.Figure:
    spec = get_chart_spec("combined")
    fig = go.Figure()
    years = [point.year for point in points]
    for attr, label, color_key in _COMBINED_TRACES:
        values = [getattr(point, attr) for point in points]
        fig.add_trace(
            go.Scatter(
                x=years,
                y=values,
                mode="lines",
                name=label,
                line=dict(color=get_chart_spec(color_key).color, width=2),
                hovertemplate=f"{label}: %{{y:.1f}}<extra></extra>",
            )
        )
    _base_layout(fig, spec)
    fig.update_layout(yaxis=dict(range=[0, 100]), hovermode="x unified")
    return fig


def team_figure(team: str | None, stats: Sequence[TeamYearStats] | None) -> go.Figure:
    spec = get_chart_spec("team_transfers")
    fig = go.Figure()
    if stats is None or not team:
        _base_layout(fig, spec)
        fig.update_layout(xaxis=dict(visible=False), yaxis=dict(visible=False))
        fig.add_annotation(
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            text=TEAM_PLACEHOLDER,
            font=dict(size=16, color="#999"),
        )
        return fig
    fig.add_trace(
        go.Scatter(
            x=[item.year for item in stats],
            y=[item.count for item in stats],
            mode="lines+markers",
            name=team,
            line=dict(color=spec.color, width=3),
            marker=dict(size=10, color="white", line=dict(color=spec.color, width=2)),
            text=[team_tooltip(item) for item in stats],
            hovertemplate="%{text}<extra></extra>",
        )
    )
    return _base_layout(fig, spec, title=f"Transfer Trends: {escape(team)}")


def scatter_figure(points: Sequence[ScatterPoint], legend: Sequence[LegendEntry]) -> go.Figure:
    spec = get_chart_spec("scatter")
    fig = go.Figure()
    for entry in legend:
        league_points = [point for point in points if point.league == entry.league]
        fig.add_trace(
            go.Scatter(
                x=[point.x for point in league_points],
                y=[point.fee for point in league_points],
                mode="markers",
                name=entry.league,
                marker=dict(color=entry.color, size=10, opacity=0.65),
                text=[scatter_tooltip(point) for point in league_points],
                hovertemplate="%{text}<extra></extra>",
            )
        )
    _base_layout(fig, spec)
    fig.update_layout(legend_title_text="League")
    return fig


def dashboard_figures(view: DashboardView) -> Dict[str, go.Figure]:
    return {
        "total_spend": line_figure("total_spend", view.total_spend),
        "avg_fee": line_figure("avg_fee", view.avg_fee),
        "transfer_count": line_figure("transfer_count", view.transfer_count),
        "combined": combined_figure(view.combined),
        "team_transfers": team_figure(view.team, view.team_stats),
    }


def figure_html(fig: go.Figure, *, div_id: str) -> str:
    """Embeddable ``<div>`` for ``fig``; the page loads plotly.js once."""

    return pio.to_html(fig, full_html=False, include_plotlyjs=False, div_id=div_id)


def figures_html(figures: Dict[str, go.Figure]) -> List[str]:
    return [figure_html(fig, div_id=f"chart-{key.replace('_', '-')}") for key, fig in figures.items()]
