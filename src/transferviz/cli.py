"""Command-line interface for summarizing and charting transfer CSVs."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path

from transferviz.api.pages import render_dashboard_page, render_scatter_page
from transferviz.charts import DashboardController, scatter_legend, scatter_points
from transferviz.charts.export import export_yearly_to_csv
from transferviz.config import load_settings
from transferviz.config_loader import ColumnProfile
from transferviz.ingest import DatasetLoadError, load_records_from_csv


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize football transfer spending from a CSV")
    parser.add_argument("transfers", type=Path, help="Path to transfers CSV")
    parser.add_argument("--team", default=None, help="Club to show in the team chart")
    parser.add_argument("--year", type=int, default=None, help="Restrict the team chart to one year")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., fee=Fee_EUR)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--html", type=Path, default=None, help="Write a standalone dashboard HTML file")
    parser.add_argument("--scatter-html", type=Path, default=None, help="Write a standalone scatter HTML file")
    parser.add_argument("--export", type=Path, default=None, help="Write the per-year aggregate CSV")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write summary JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging (lists skipped rows)",
    )
    return parser.parse_args()


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main() -> None:
    args = _parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    mapping = _parse_mapping(args.column)
    if args.load_profile:
        profile = ColumnProfile.load(args.load_profile)
        mapping = profile.transfer_mapping | mapping

    try:
        records, report = load_records_from_csv(args.transfers, mapping=mapping or None)
    except DatasetLoadError as exc:
        raise SystemExit(f"Error loading data: {exc}") from None

    if args.save_profile:
        ColumnProfile(mapping).save(args.save_profile)
        print(f"Saved column profile to {args.save_profile}")

    print(f"Loaded {report.kept_rows}/{report.total_rows} rows ({report.dropped_rows} skipped)")

    controller = DashboardController(records)
    view = controller.select_team(args.team, args.year) if args.team else controller.view

    summary = view.summary
    if summary is None:
        print("No valid transfers to summarize")
    else:
        print(f"Total spending: €{summary.total_spend:,.0f}M")
        print(f"Peak year: {summary.peak_year}")
        print(f"Total transfers: {summary.total_transfers:,}")
        print(f"Average annual spend: €{summary.avg_annual_spend:,.1f}M")

    if view.team_stats is not None:
        print(f"Transfer trends for {view.team}:")
        if not view.team_stats:
            print("  no transfers")
        for item in view.team_stats:
            print(
                f"  {item.year}: {item.count} transfers, €{item.total_fee:.0f}M total, "
                f"€{item.avg_fee:.2f}M average"
            )

    if args.report:
        payload = {
            "total_rows": report.total_rows,
            "kept_rows": report.kept_rows,
            "dropped_rows": report.dropped_rows,
            "summary": summary.model_dump() if summary else None,
            "yearly": [item.model_dump() for item in view.yearly],
            "team": view.team,
            "team_stats": (
                [item.model_dump() for item in view.team_stats] if view.team_stats is not None else None
            ),
        }
        args.report.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote summary report to {args.report}")

    if args.export:
        rows = view.team_stats if view.team_stats is not None else view.yearly
        args.export.write_text(export_yearly_to_csv(rows), encoding="utf-8")
        print(f"Wrote yearly CSV to {args.export}")

    if args.html:
        content = render_dashboard_page(
            view,
            dataset_id="cli",
            dataset_name=args.transfers.name,
            report=report,
            standalone=True,
        )
        args.html.write_text(content, encoding="utf-8")
        print(f"Wrote dashboard to {args.html}")

    if args.scatter_html:
        settings = load_settings()
        rng = random.Random(settings.jitter_seed) if settings.jitter_seed is not None else random.Random()
        points = scatter_points(records, jitter=settings.scatter_jitter, rng=rng)
        content = render_scatter_page(
            points,
            scatter_legend(records),
            dataset_name=args.transfers.name,
            report=report,
            standalone=True,
        )
        args.scatter_html.write_text(content, encoding="utf-8")
        print(f"Wrote scatter plot to {args.scatter_html}")


if __name__ == "__main__":
    main()
