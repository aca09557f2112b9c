"""HTML page composition for the dashboard and scatter views."""

from __future__ import annotations

from html import escape
from typing import Sequence
from urllib.parse import urlencode

from transferviz.charts.render import PLOTLY_CDN, dashboard_figures, figures_html, figure_html, scatter_figure
from transferviz.charts.series import LegendEntry, ScatterPoint
from transferviz.charts.view import DashboardView
from transferviz.ingest import NormalizeReport
from transferviz.models import SummaryStats


LOAD_ERROR_MESSAGE = (
    "Error loading data. Make sure the transfer CSV is available or upload one below."
)


def _render_page(body: str, *, title: str = "Transfer Market Dashboard", charts: bool = True) -> str:
    script = f'<script src="{PLOTLY_CDN}"></script>' if charts else ""
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>{escape(title)}</title>
    {script}
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }}
        main {{ background: #fff; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }}
        nav a {{ margin-right: 1rem; color: #2563eb; text-decoration: none; }}
        form {{ display: flex; gap: 1rem; flex-wrap: wrap; align-items: flex-end; margin-bottom: 1.5rem; }}
        label {{ display: flex; flex-direction: column; font-weight: 600; }}
        select, input {{ margin-top: 0.35rem; padding: 0.4rem; border-radius: 6px; border: 1px solid #cbd5e1; }}
        button {{ padding: 0.6rem 1.2rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }}
        a.reset {{ padding: 0.6rem 1.2rem; border-radius: 6px; background: #475569; color: #fff; text-decoration: none; }}
        .stats {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 1rem; margin-bottom: 1.5rem; }}
        .stat-card {{ padding: 1rem; border: 1px solid #e2e8f0; border-radius: 8px; background: #f8fafc; }}
        .stat-card h3 {{ margin: 0 0 0.5rem; font-size: 0.9rem; color: #475569; }}
        .stat-card .value {{ font-size: 1.6rem; font-weight: 700; }}
        .charts {{ display: flex; flex-wrap: wrap; gap: 1rem; }}
        .notice {{ margin: 0.5rem 0; padding: 0.75rem 1rem; border-radius: 6px; }}
        .notice.success {{ background: #ecfdf5; color: #065f46; border: 1px solid #a7f3d0; }}
        .notice.error {{ background: #fef2f2; color: #991b1b; border: 1px solid #fecaca; }}
        .uploads ul {{ list-style: none; padding: 0; }}
        .uploads a {{ color: #2563eb; text-decoration: none; }}
        .hint {{ color: #475569; margin: 0 0 1rem; }}
    </style>
</head>
<body>
    <nav><a href=\"/ui\">Dashboard</a><a href=\"/ui/scatter\">Scatter</a></nav>
    <main>{body}</main>
</body>
</html>"""


def _upload_form(action: str) -> str:
    return (
        f'<form method="post" action="{action}" enctype="multipart/form-data">'
        '<label>Transfer CSV<input type="file" name="transfers" accept=".csv,text/csv"></label>'
        '<button type="submit">Load file</button>'
        "</form>"
    )


def _report_notice(name: str, report: NormalizeReport) -> str:
    return (
        f'<div class="notice success">{escape(name)}: {report.kept_rows} of {report.total_rows} rows loaded'
        f" ({report.dropped_rows} skipped)</div>"
    )


def render_summary(summary: SummaryStats | None) -> str:
    if summary is None:
        return '<div class="stats"><p class="hint">No transfers to summarize.</p></div>'
    cards = [
        ("Total Spending", f"€{summary.total_spend:,.0f}M"),
        ("Peak Year", str(summary.peak_year)),
        ("Total Transfers", f"{summary.total_transfers:,}"),
        ("Average Annual Spend", f"€{summary.avg_annual_spend:,.1f}M"),
    ]
    body = "".join(
        f'<div class="stat-card"><h3>{label}</h3><div class="value">{value}</div></div>'
        for label, value in cards
    )
    return f'<div class="stats" id="stats">{body}</div>'


def _controls(view: DashboardView, dataset_id: str) -> str:
    options = ['<option value="">Select a team</option>']
    for option in view.team_options:
        selected = " selected" if option.team == view.team else ""
        options.append(
            f'<option value="{escape(option.team, quote=True)}"{selected}>'
            f"{escape(option.team)} ({option.count})</option>"
        )
    year_value = "" if view.criteria.year is None else str(view.criteria.year)
    reset_href = "/ui?" + urlencode({"dataset": dataset_id})
    return (
        '<form method="get" action="/ui" id="controls">'
        f'<input type="hidden" name="dataset" value="{escape(dataset_id, quote=True)}">'
        f'<label>Team<select name="team" id="team-select">{"".join(options)}</select></label>'
        f'<label>Year<input type="number" name="year" value="{year_value}"></label>'
        '<button type="submit">Apply</button>'
        f'<a class="reset" id="reset-filters" href="{escape(reset_href, quote=True)}">Reset</a>'
        "</form>"
    )


def _uploads_list(uploads: Sequence[tuple[str, str]]) -> str:
    if not uploads:
        return ""
    items = "".join(
        f'<li><a href="/ui?{escape(urlencode({"dataset": dataset_id}), quote=True)}">{escape(name)}</a></li>'
        for dataset_id, name in uploads
    )
    return f'<div class="uploads"><h3>Recent uploads</h3><ul>{items}</ul></div>'


def render_dashboard_page(
    view: DashboardView,
    *,
    dataset_id: str,
    dataset_name: str,
    report: NormalizeReport | None = None,
    uploads: Sequence[tuple[str, str]] = (),
    standalone: bool = False,
) -> str:
    """Full dashboard page. ``standalone`` drops the server-only controls."""

    charts = "".join(figures_html(dashboard_figures(view)))
    parts = [f"<h1>Transfer Market Dashboard</h1><p class=\"hint\">{escape(dataset_name)}</p>"]
    if not standalone:
        parts.append(_upload_form("/ui"))
    if report is not None:
        parts.append(_report_notice(dataset_name, report))
    parts.append(render_summary(view.summary))
    if not standalone:
        parts.append(_controls(view, dataset_id))
    parts.append(f'<div class="charts" id="content">{charts}</div>')
    if not standalone:
        parts.append(_uploads_list(uploads))
    return _render_page("".join(parts))


def render_scatter_page(
    points: Sequence[ScatterPoint],
    legend: Sequence[LegendEntry],
    *,
    dataset_name: str,
    report: NormalizeReport | None = None,
    standalone: bool = False,
) -> str:
    chart = figure_html(scatter_figure(points, legend), div_id="chart")
    parts = [f"<h1>Transfer Fees by League</h1><p class=\"hint\">{escape(dataset_name)}</p>"]
    if not standalone:
        parts.append(_upload_form("/ui/scatter"))
    if report is not None:
        parts.append(_report_notice(dataset_name, report))
    parts.append(chart)
    return _render_page("".join(parts), title="Transfer Fees by League")


def render_error_page(message: str, *, upload_action: str = "/ui") -> str:
    body = (
        "<h1>Transfer Market Dashboard</h1>"
        f'<div class="notice error" id="loading">{escape(message)}</div>'
        f"{_upload_form(upload_action)}"
    )
    return _render_page(body, charts=False)
