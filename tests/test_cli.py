import json
import sys
from pathlib import Path

import pytest

from transferviz import cli


CSV = """Player,Club_Left,Club_Joined,League_Joined,Transfer_Window,Transfer_Fee_In_MillionEuro
P1,Old,X,A,2019,80
P2,Old,Y,A,2019,20
P3,Old,X,B,2020,50
P4,Old,Z,B,2020,N/A
"""


def _run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["transferviz", *argv])
    cli.main()


def test_cli_prints_summary(monkeypatch, capsys, tmp_path: Path):
    path = tmp_path / "transfers.csv"
    path.write_text(CSV, encoding="utf-8")

    _run(monkeypatch, str(path))

    out = capsys.readouterr().out
    assert "Loaded 3/4 rows (1 skipped)" in out
    assert "Total spending: €150M" in out
    assert "Peak year: 2019" in out


def test_cli_writes_outputs_for_team(monkeypatch, capsys, tmp_path: Path):
    path = tmp_path / "transfers.csv"
    path.write_text(CSV, encoding="utf-8")
    report = tmp_path / "report.json"
    export = tmp_path / "yearly.csv"
    html = tmp_path / "dashboard.html"
    scatter = tmp_path / "scatter.html"

    _run(
        monkeypatch,
        str(path),
        "--team",
        "X",
        "--report",
        str(report),
        "--export",
        str(export),
        "--html",
        str(html),
        "--scatter-html",
        str(scatter),
    )

    out = capsys.readouterr().out
    assert "Transfer trends for X:" in out
    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["dropped_rows"] == 1
    assert payload["team"] == "X"
    assert [item["year"] for item in payload["team_stats"]] == [2019, 2020]
    assert export.read_text(encoding="utf-8").startswith("team,year,")
    assert "Transfer Trends: X" in html.read_text(encoding="utf-8")
    assert "Transfer Fees by League" in scatter.read_text(encoding="utf-8")


def test_cli_column_mapping_and_profile(monkeypatch, capsys, tmp_path: Path):
    path = tmp_path / "custom.csv"
    path.write_text("Season,Fee,Comp\n2021,3,Eredivisie\n", encoding="utf-8")
    profile = tmp_path / "profile.json"

    _run(
        monkeypatch,
        str(path),
        "--column",
        "year=Season",
        "--column",
        "fee=Fee",
        "--column",
        "league=Comp",
        "--save-profile",
        str(profile),
    )
    assert "Loaded 1/1 rows" in capsys.readouterr().out

    _run(monkeypatch, str(path), "--load-profile", str(profile))
    assert "Peak year: 2021" in capsys.readouterr().out


def test_cli_missing_file_exits(monkeypatch, tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, str(tmp_path / "missing.csv"))

    assert "Error loading data" in str(excinfo.value)


def test_parse_mapping_rejects_malformed_entry():
    assert cli._parse_mapping(["fee = Fee_EUR"]) == {"fee": "Fee_EUR"}
    with pytest.raises(ValueError):
        cli._parse_mapping(["fee"])
