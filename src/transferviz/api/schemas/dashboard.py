from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

from .dataset import TeamOptionResponse


class SeriesPointResponse(BaseModel):
    year: int
    value: float


class YearStatsResponse(BaseModel):
    year: int
    total_fee: float
    count: int
    avg_fee: float
    max_fee: float
    min_fee: float


class TeamYearStatsResponse(YearStatsResponse):
    team: str


class CombinedPointResponse(BaseModel):
    year: int
    spend: float
    avg_fee: float
    count: float


class SummaryResponse(BaseModel):
    total_spend: float
    peak_year: int
    total_transfers: int
    avg_annual_spend: float
    years: int


class DashboardResponse(BaseModel):
    dataset_id: str
    state: Literal["unfiltered", "filtered"]
    team: str | None
    year: int | None
    summary: SummaryResponse | None
    yearly: List[YearStatsResponse]
    total_spend: List[SeriesPointResponse]
    avg_fee: List[SeriesPointResponse]
    transfer_count: List[SeriesPointResponse]
    combined: List[CombinedPointResponse]
    team_stats: List[TeamYearStatsResponse] | None
    team_options: List[TeamOptionResponse]


class ScatterPointResponse(BaseModel):
    year: int
    x: float
    fee: float
    league: str
    player: str
    club_joined: str
    club_left: str


class LegendEntryResponse(BaseModel):
    league: str
    color: str


class ScatterResponse(BaseModel):
    dataset_id: str
    points: List[ScatterPointResponse]
    legend: List[LegendEntryResponse]
