import pytest
from pydantic import ValidationError

from nbavalue.models import CompensationRecord, SeasonStats

from tests.samples import season


def test_season_stats_is_frozen():
    stats = season()

    assert stats.season == "2024-25"
    assert stats.age is None

    with pytest.raises((TypeError, ValidationError)):
        stats.points = 10  # type: ignore[misc]


def test_season_stats_rejects_negative_counting_stats():
    with pytest.raises(ValidationError):
        season(rebounds=-1)


@pytest.mark.parametrize("label", ["2024", "24-25", "2024/25", "season 2024-25", ""])
def test_season_stats_rejects_unsortable_season_labels(label):
    with pytest.raises(ValidationError):
        season(season=label)


def test_season_stats_allows_zero_minutes():
    stats = SeasonStats(
        season="2021-22",
        games_played=0,
        minutes=0,
        points=0,
        assists=0,
        rebounds=0,
        steals=0,
        blocks=0,
        turnovers=0,
    )
    assert stats.minutes == 0
    assert stats.fg_attempted == 0


def test_compensation_record_key():
    record = CompensationRecord(player_id="2544", player_name="LeBron James", season="2024-25", salary=48_728_845)
    assert record.key == ("2544", "2024-25")

    with pytest.raises(ValidationError):
        CompensationRecord(player_id="", player_name="Nobody", season="2024-25", salary=1)
