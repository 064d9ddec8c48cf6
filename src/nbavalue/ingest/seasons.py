"""Adapters for the stats provider's season-total payloads."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Sequence

from nbavalue.models import SeasonStats


SEASON_TOTALS_RESULT_SET = "SeasonTotalsRegularSeason"

# SeasonStats field -> provider column
_STAT_COLUMNS: Mapping[str, str] = {
    "games_played": "GP",
    "minutes": "MIN",
    "points": "PTS",
    "assists": "AST",
    "rebounds": "REB",
    "steals": "STL",
    "blocks": "BLK",
    "turnovers": "TOV",
    "fg_made": "FGM",
    "fg_attempted": "FGA",
    "fg3_made": "FG3M",
    "fg3_attempted": "FG3A",
    "ft_made": "FTM",
    "ft_attempted": "FTA",
}


def _find_result_set(payload: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    for result_set in payload.get("resultSets") or []:
        if result_set.get("name") == name:
            return result_set
    raise KeyError(f"Result set {name!r} not found in payload")


def season_stats_from_result_set(
    payload: Mapping[str, Any],
    *,
    name: str = SEASON_TOTALS_RESULT_SET,
) -> List[SeasonStats]:
    """Convert a ``headers``/``rowSet`` result set into ``SeasonStats`` rows."""

    result_set = _find_result_set(payload, name)
    headers: Sequence[str] = result_set.get("headers") or []
    index = {header: position for position, header in enumerate(headers)}

    def cell(row: Sequence[Any], column: str) -> Any:
        position = index.get(column)
        if position is None or position >= len(row):
            return None
        return row[position]

    by_season: dict[str, SeasonStats] = {}
    for row in result_set.get("rowSet") or []:
        data: dict[str, Any] = {"season": str(cell(row, "SEASON_ID") or "")}
        for field_name, column in _STAT_COLUMNS.items():
            data[field_name] = cell(row, column) or 0
        age = cell(row, "PLAYER_AGE")
        data["age"] = int(age) if age else None
        stats = SeasonStats(**data)
        # Traded players get one row per team plus a combined row; keep the combined one.
        existing = by_season.get(stats.season)
        if existing is None or stats.games_played > existing.games_played:
            by_season[stats.season] = stats
    return list(by_season.values())


def current_season(today: Optional[date] = None) -> str:
    """Season label for ``today``; a new season starts in October."""

    today = today or date.today()
    start_year = today.year if today.month >= 10 else today.year - 1
    return f"{start_year}-{str(start_year + 1)[-2:]}"


def age_from_birthdate(birthdate: Optional[str | date], today: Optional[date] = None) -> Optional[int]:
    """Whole years between ``birthdate`` and ``today``; ``None`` when unknown."""

    if not birthdate:
        return None
    if isinstance(birthdate, str):
        # Provider birthdates look like "1984-12-30T00:00:00".
        born = datetime.fromisoformat(birthdate.strip()).date()
    else:
        born = birthdate
    today = today or date.today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age
