import json
from pathlib import Path

import pytest

from nbavalue.cli import format_currency, load_season_stats, main

from tests.samples import three_seasons


@pytest.fixture
def stats_file(tmp_path: Path) -> Path:
    path = tmp_path / "seasons.json"
    path.write_text(json.dumps([stats.model_dump() for stats in three_seasons()]), encoding="utf-8")
    return path


@pytest.fixture
def contracts_file(tmp_path: Path) -> Path:
    path = tmp_path / "contracts.csv"
    path.write_text(
        "player_id,player_name,season,salary\n12345,Sample Star,2024-25,20000000\n9,Other,2024-25,40000000\n",
        encoding="utf-8",
    )
    return path


def test_format_currency():
    assert format_currency(12_345_678) == "$12.3M"
    assert format_currency(450_000) == "$450K"
    assert format_currency(900) == "$900"
    assert format_currency(-2_500_000) == "$-2.5M"


def test_load_season_stats_accepts_provider_payload(tmp_path: Path):
    path = tmp_path / "career.json"
    path.write_text(
        json.dumps(
            {
                "resultSets": [
                    {
                        "name": "SeasonTotalsRegularSeason",
                        "headers": ["SEASON_ID", "GP", "MIN", "PTS"],
                        "rowSet": [["2024-25", 60, 1800, 900]],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    seasons = load_season_stats(path)
    assert len(seasons) == 1
    assert seasons[0].points == 900
    assert seasons[0].assists == 0


def test_load_season_stats_rejects_scalars(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text("42", encoding="utf-8")
    with pytest.raises(ValueError):
        load_season_stats(path)


def test_main_prints_json(stats_file: Path, contracts_file: Path, capsys):
    main([
        str(stats_file),
        "--player-id", "12345",
        "--season", "2024-25",
        "--age", "27",
        "--contracts", str(contracts_file),
        "--estimate-population",
        "--json",
    ])
    payload = json.loads(capsys.readouterr().out)
    assert payload["compensation"]["actual_value"] == 20_000_000
    assert payload["explanation"]["stock_index"]["population_size"] == 2


def test_main_summary_uses_birthdate(stats_file: Path, tmp_path: Path, capsys):
    main([
        str(stats_file),
        "--player-id", "12345",
        "--season", "2024-25",
        "--birthdate", "2003-01-15",
        "--contracts", str(tmp_path / "missing.csv"),
    ])
    out = capsys.readouterr().out
    assert "Player 12345 - 2024-25" in out
    assert "Actual value: not on record" in out
    assert "Stock index: 50.0" in out
    assert "2022-23" in out
