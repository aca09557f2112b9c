from pathlib import Path

from transferviz.config_loader import ColumnProfile


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "profile.json"
    ColumnProfile({"fee": "Fee_EUR"}).save(path)

    assert ColumnProfile.load(path).transfer_mapping == {"fee": "Fee_EUR"}


def test_profile_without_mapping_key(tmp_path: Path):
    path = tmp_path / "profile.json"
    path.write_text("{}", encoding="utf-8")

    assert ColumnProfile.load(path).transfer_mapping == {}
