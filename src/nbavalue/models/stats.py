"""Season totals and compensation records consumed by the valuation engine."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# "2024-25" style identifiers sort chronologically as plain strings.
SEASON_PATTERN = r"^\d{4}-\d{2}$"


class SeasonStats(BaseModel):
    """Cumulative regular-season totals for one player-season."""

    season: str = Field(..., pattern=SEASON_PATTERN)
    games_played: int = Field(..., ge=0)
    minutes: float = Field(..., ge=0.0)
    points: float = Field(..., ge=0.0)
    assists: float = Field(..., ge=0.0)
    rebounds: float = Field(..., ge=0.0)
    steals: float = Field(..., ge=0.0)
    blocks: float = Field(..., ge=0.0)
    turnovers: float = Field(..., ge=0.0)
    fg_made: float = Field(default=0.0, ge=0.0)
    fg_attempted: float = Field(default=0.0, ge=0.0)
    fg3_made: float = Field(default=0.0, ge=0.0)
    fg3_attempted: float = Field(default=0.0, ge=0.0)
    ft_made: float = Field(default=0.0, ge=0.0)
    ft_attempted: float = Field(default=0.0, ge=0.0)
    age: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)


class CompensationRecord(BaseModel):
    """Known salary for a player in one season."""

    player_id: str = Field(..., min_length=1)
    player_name: str
    season: str = Field(..., pattern=SEASON_PATTERN)
    salary: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[str, str]:
        return self.player_id, self.season
