from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from nbavalue.models import SEASON_PATTERN, SeasonStats
from nbavalue.valuation import ValuationResult


class PlayerHistoryPayload(BaseModel):
    player_id: str = Field(..., min_length=1)
    age: int | None = Field(default=None, ge=0)
    seasons: List[SeasonStats] = Field(default_factory=list)


class ValuationRequest(PlayerHistoryPayload):
    season: str = Field(..., pattern=SEASON_PATTERN)
    comparison_surplus: List[float] | None = None


class BatchValuationRequest(BaseModel):
    season: str = Field(..., pattern=SEASON_PATTERN)
    players: List[PlayerHistoryPayload] = Field(..., min_length=1)


class BatchValuationResponse(BaseModel):
    season: str
    valuations: List[ValuationResult]


class CompensationRecordResponse(BaseModel):
    player_id: str
    player_name: str
    season: str
    salary: int


class ReloadResponse(BaseModel):
    records: int
