"""Helpers to load transfer CSVs and emit canonical records."""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, TextIO, Tuple

from pydantic import BaseModel, ValidationError

from transferviz.models import TransferRecord


logger = logging.getLogger(__name__)


class DatasetLoadError(RuntimeError):
    """Raised when a transfer CSV cannot be found or read."""


DEFAULT_TRANSFER_MAPPING = {
    "year": "Transfer_Window",
    "fee": "Transfer_Fee_In_MillionEuro",
    "league": "League_Joined",
    "player": "Player",
    "club_joined": "Club_Joined",
    "club_left": "Club_Left",
}


class TransferRow(BaseModel):
    raw_year: Optional[str] = None
    raw_fee: Optional[str] = None
    raw_league: Optional[str] = None
    raw_player: Optional[str] = None
    raw_club_joined: Optional[str] = None
    raw_club_left: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Optional[str]], mapping: Mapping[str, str]) -> "TransferRow":
        def extract(key: str) -> Optional[str]:
            column = mapping.get(key, DEFAULT_TRANSFER_MAPPING[key])
            value = row.get(column)
            return value if isinstance(value, str) else None

        return cls(
            raw_year=extract("year"),
            raw_fee=extract("fee"),
            raw_league=extract("league"),
            raw_player=extract("player"),
            raw_club_joined=extract("club_joined"),
            raw_club_left=extract("club_left"),
        )


@dataclass(frozen=True)
class NormalizeReport:
    total_rows: int
    kept_rows: int
    dropped_rows: int


def _read_rows(handle: TextIO, mapping: Mapping[str, str] | None) -> List[TransferRow]:
    mapping = mapping or DEFAULT_TRANSFER_MAPPING
    reader = csv.DictReader(handle)
    return [TransferRow.from_mapping(row, mapping) for row in reader]


def load_transfer_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[TransferRow]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            return _read_rows(f, mapping)
    except FileNotFoundError:
        raise DatasetLoadError(f"transfer file {path} not found") from None
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise DatasetLoadError(f"unable to read transfer file {path}: {exc}") from exc


def parse_transfer_csv(text: str, *, mapping: Mapping[str, str] | None = None) -> List[TransferRow]:
    """Parse CSV text (e.g. an uploaded file) into raw rows."""

    try:
        return _read_rows(StringIO(text.lstrip("\ufeff"), newline=""), mapping)
    except csv.Error as exc:
        raise DatasetLoadError(f"unable to parse transfer CSV: {exc}") from exc


def _parse_number(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_year(raw: Optional[str]) -> Optional[int]:
    value = _parse_number(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def _parse_fee(raw: Optional[str]) -> Optional[float]:
    value = _parse_number(raw)
    if value is None or value < 0:
        return None
    return value


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def _row_to_record(row: TransferRow) -> Optional[TransferRecord]:
    year = _parse_year(row.raw_year)
    if year is None:
        return None
    fee = _parse_fee(row.raw_fee)
    if fee is None:
        return None
    league = _clean(row.raw_league)
    if not league:
        return None
    try:
        return TransferRecord(
            year=year,
            fee=fee,
            league=league,
            player=_clean(row.raw_player),
            club_joined=_clean(row.raw_club_joined),
            club_left=_clean(row.raw_club_left),
        )
    except ValidationError:
        return None


def normalize_rows(rows: Sequence[TransferRow]) -> Tuple[List[TransferRecord], NormalizeReport]:
    records: List[TransferRecord] = []
    for index, row in enumerate(rows):
        record = _row_to_record(row)
        if record is None:
            logger.debug(
                "Dropping row %d (year=%r, fee=%r, league=%r)",
                index,
                row.raw_year,
                row.raw_fee,
                row.raw_league,
            )
            continue
        records.append(record)
    report = NormalizeReport(
        total_rows=len(rows),
        kept_rows=len(records),
        dropped_rows=len(rows) - len(records),
    )
    return records, report


def rows_to_records(rows: Sequence[TransferRow]) -> List[TransferRecord]:
    records, _ = normalize_rows(rows)
    return records


def load_records_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[TransferRecord], NormalizeReport]:
    records, report = normalize_rows(load_transfer_csv(path, mapping=mapping))
    logger.info(
        "Loaded %s: kept %d of %d rows (%d dropped)",
        path,
        report.kept_rows,
        report.total_rows,
        report.dropped_rows,
    )
    return records, report


def load_records_from_text(
    text: str,
    *,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[TransferRecord], NormalizeReport]:
    records, report = normalize_rows(parse_transfer_csv(text, mapping=mapping))
    logger.info(
        "Parsed uploaded CSV: kept %d of %d rows (%d dropped)",
        report.kept_rows,
        report.total_rows,
        report.dropped_rows,
    )
    return records, report
