"""Input adapters that normalize raw compensation and season data."""

from .contracts import (
    CompensationFormatError,
    CompensationIndex,
    load_compensation_csv,
)
from .seasons import (
    SEASON_TOTALS_RESULT_SET,
    age_from_birthdate,
    current_season,
    season_stats_from_result_set,
)

__all__ = [
    "CompensationFormatError",
    "CompensationIndex",
    "load_compensation_csv",
    "SEASON_TOTALS_RESULT_SET",
    "age_from_birthdate",
    "current_season",
    "season_stats_from_result_set",
]
