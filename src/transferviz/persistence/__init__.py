"""In-process registry of loaded transfer datasets."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Mapping, Optional
from uuid import uuid4

from transferviz.ingest import NormalizeReport, load_records_from_csv, load_records_from_text
from transferviz.models import TransferRecord


logger = logging.getLogger(__name__)

DEFAULT_DATASET_ID = "default"


@dataclass(frozen=True)
class DatasetRecord:
    dataset_id: str
    name: str
    created_at: datetime
    records: tuple[TransferRecord, ...]
    report: NormalizeReport


class DatasetStore:
    """Holds the bundled dataset plus a bounded number of uploads.

    Uploads beyond ``max_datasets`` evict the oldest upload. Nothing is
    written to disk.
    """

    def __init__(self, default_path: Path, *, max_datasets: int = 20):
        self.default_path = default_path
        self.max_datasets = max(1, max_datasets)
        self._lock = threading.Lock()
        self._default: Optional[DatasetRecord] = None
        self._uploads: "OrderedDict[str, DatasetRecord]" = OrderedDict()

    def get_default(self) -> DatasetRecord:
        """Load the bundled dataset on first use; raises ``DatasetLoadError``."""

        with self._lock:
            if self._default is None:
                records, report = load_records_from_csv(self.default_path)
                self._default = DatasetRecord(
                    dataset_id=DEFAULT_DATASET_ID,
                    name=self.default_path.name,
                    created_at=datetime.now(timezone.utc),
                    records=tuple(records),
                    report=report,
                )
            return self._default

    def save_upload(
        self,
        text: str,
        *,
        name: str,
        mapping: Mapping[str, str] | None = None,
    ) -> DatasetRecord:
        records, report = load_records_from_text(text, mapping=mapping)
        dataset = DatasetRecord(
            dataset_id=uuid4().hex,
            name=name,
            created_at=datetime.now(timezone.utc),
            records=tuple(records),
            report=report,
        )
        with self._lock:
            self._uploads[dataset.dataset_id] = dataset
            while len(self._uploads) > self.max_datasets:
                evicted_id, _ = self._uploads.popitem(last=False)
                logger.info("Evicted uploaded dataset %s", evicted_id)
        return dataset

    def get(self, dataset_id: Optional[str]) -> Optional[DatasetRecord]:
        """Resolve a dataset id; ``None`` or ``"default"`` means the bundled file."""

        if not dataset_id or dataset_id == DEFAULT_DATASET_ID:
            return self.get_default()
        with self._lock:
            return self._uploads.get(dataset_id)

    def list_uploads(self) -> List[DatasetRecord]:
        with self._lock:
            return list(reversed(self._uploads.values()))
