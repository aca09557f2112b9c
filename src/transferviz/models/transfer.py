"""Canonical transfer models shared across ingestion, aggregation and charts."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TransferRecord(BaseModel):
    """Normalized transfer payload used by the aggregation pipeline."""

    year: int
    fee: float = Field(..., ge=0.0, allow_inf_nan=False)
    league: str = Field(..., min_length=1)
    player: str = ""
    club_joined: str = ""
    club_left: str = ""

    model_config = ConfigDict(frozen=True)


class YearStats(BaseModel):
    year: int
    total_fee: float
    count: int = Field(..., ge=1)
    avg_fee: float
    max_fee: float
    min_fee: float

    model_config = ConfigDict(frozen=True)


class TeamYearStats(YearStats):
    team: str


class SummaryStats(BaseModel):
    """Headline numbers for the summary panel."""

    total_spend: float
    peak_year: int
    total_transfers: int
    avg_annual_spend: float
    years: int

    model_config = ConfigDict(frozen=True)


class TeamOption(BaseModel):
    team: str
    count: int

    model_config = ConfigDict(frozen=True)
