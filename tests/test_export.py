from transferviz.aggregate import aggregate_by_year, aggregate_team
from transferviz.charts.export import YEARLY_HEADERS, export_yearly_to_csv
from transferviz.models import TransferRecord


def _records() -> list[TransferRecord]:
    return [
        TransferRecord(year=2020, fee=50, league="B", club_joined="X"),
        TransferRecord(year=2019, fee=80, league="A", club_joined="X"),
        TransferRecord(year=2019, fee=20, league="A", club_joined="Y"),
    ]


def test_export_yearly_rows():
    lines = export_yearly_to_csv(aggregate_by_year(_records())).splitlines()

    assert lines[0] == ",".join(YEARLY_HEADERS)
    assert lines[1] == "2019,100.0,2,50.0,80.0,20.0"
    assert lines[2] == "2020,50.0,1,50.0,50.0,50.0"


def test_export_team_rows_include_team_column():
    lines = export_yearly_to_csv(aggregate_team(_records(), "X")).splitlines()

    assert lines[0].startswith("team,year,")
    assert lines[1] == "X,2019,80.0,1,80.0,80.0,80.0"


def test_export_empty_has_header_only():
    assert export_yearly_to_csv([]).splitlines() == [",".join(YEARLY_HEADERS)]
