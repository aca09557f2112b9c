from transferviz.filters import FilterCriteria, filter_records
from transferviz.models import TransferRecord


def _records() -> list[TransferRecord]:
    return [
        TransferRecord(year=2019, fee=80, league="A", club_joined="X"),
        TransferRecord(year=2019, fee=20, league="A", club_joined="Y"),
        TransferRecord(year=2020, fee=50, league="B", club_joined="X"),
    ]


def test_filter_by_team():
    result = filter_records(_records(), FilterCriteria(team="X"))

    assert [record.fee for record in result.records] == [80, 50]
    assert result.available_records == 3
    assert result.selected_records == 2


def test_filter_by_team_and_year():
    result = filter_records(_records(), FilterCriteria(team="X", year=2020))

    assert [record.year for record in result.records] == [2020]


def test_empty_criteria_keeps_everything():
    criteria = FilterCriteria()

    assert criteria.is_empty
    assert filter_records(_records(), criteria).selected_records == 3


def test_unknown_team_yields_empty_selection():
    result = filter_records(_records(), FilterCriteria(team="Z"))

    assert result.records == ()
    assert result.selected_records == 0


def test_from_params_treats_blank_team_as_no_selection():
    assert FilterCriteria.from_params("   ").team is None
    assert FilterCriteria.from_params(None).is_empty
    assert FilterCriteria.from_params(" X ", 2019) == FilterCriteria(team="X", year=2019)
