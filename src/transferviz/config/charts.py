"""Chart layout configuration for the dashboard and scatter views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class ChartSpec:
    key: str
    title: str
    metric: str
    y_label: str
    width: int
    height: int
    color: str
    x_label: str = "Year"


# d3.schemeTableau10
TABLEAU10: Tuple[str, ...] = (
    "#4e79a7",
    "#f28e2c",
    "#e15759",
    "#76b7b2",
    "#59a14f",
    "#edc949",
    "#af7aa1",
    "#ff9da7",
    "#9c755f",
    "#bab0ab",
)

TEAM_PLACEHOLDER = "Select a team from the dropdown to view transfer trends"


_CHART_SPECS: Dict[str, ChartSpec] = {
    "total_spend": ChartSpec(
        key="total_spend",
        title="Total Spending",
        metric="total_fee",
        y_label="Spending (Million €)",
        width=600,
        height=350,
        color="#2563eb",
    ),
    "avg_fee": ChartSpec(
        key="avg_fee",
        title="Average Fee",
        metric="avg_fee",
        y_label="Average Fee (Million €)",
        width=600,
        height=350,
        color="#f59e0b",
    ),
    "transfer_count": ChartSpec(
        key="transfer_count",
        title="Transfer Count",
        metric="count",
        y_label="Number of Transfers",
        width=1200,
        height=300,
        color="#10b981",
    ),
    "combined": ChartSpec(
        key="combined",
        title="Combined (Normalized)",
        metric="normalized",
        y_label="Normalized Value (0-100)",
        width=1200,
        height=350,
        color="#475569",
    ),
    "team_transfers": ChartSpec(
        key="team_transfers",
        title="Team Transfers Over Time",
        metric="count",
        y_label="Number of Transfers",
        width=1200,
        height=400,
        color="#06b6d4",
    ),
    "scatter": ChartSpec(
        key="scatter",
        title="Transfer Fees by League",
        metric="fee",
        y_label="Transfer Fee (Million €)",
        width=900,
        height=500,
        color="#4e79a7",
    ),
}


def iter_chart_specs() -> Iterable[ChartSpec]:
    """Return an iterator of all configured charts."""

    return _CHART_SPECS.values()


def get_chart_spec(key: str) -> ChartSpec:
    """Fetch the layout for a chart key, raising KeyError if missing."""

    normalized = key.strip().lower()
    if normalized not in _CHART_SPECS:
        raise KeyError(f"No chart configured for key={key!r}")
    return _CHART_SPECS[normalized]


# Dashboard order of the yearly line charts.
DASHBOARD_CHARTS: Mapping[str, ChartSpec] = {
    key: _CHART_SPECS[key] for key in ("total_spend", "avg_fee", "transfer_count", "combined", "team_transfers")
}
