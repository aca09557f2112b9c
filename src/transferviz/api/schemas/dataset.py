from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class NormalizeReportResponse(BaseModel):
    total_rows: int
    kept_rows: int
    dropped_rows: int


class DatasetResponse(BaseModel):
    dataset_id: str
    name: str
    created_at: datetime
    report: NormalizeReportResponse


class TeamOptionResponse(BaseModel):
    team: str
    count: int
