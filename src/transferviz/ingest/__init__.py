"""Input adapters that normalize raw transfer data."""

from .transfers import (
    DEFAULT_TRANSFER_MAPPING,
    DatasetLoadError,
    NormalizeReport,
    TransferRow,
    load_records_from_csv,
    load_records_from_text,
    load_transfer_csv,
    normalize_rows,
    parse_transfer_csv,
    rows_to_records,
)

__all__ = [
    "DEFAULT_TRANSFER_MAPPING",
    "DatasetLoadError",
    "NormalizeReport",
    "TransferRow",
    "load_transfer_csv",
    "parse_transfer_csv",
    "normalize_rows",
    "rows_to_records",
    "load_records_from_csv",
    "load_records_from_text",
]
