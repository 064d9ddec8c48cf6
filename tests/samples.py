"""Shared season fixtures used across the test modules."""

from __future__ import annotations

from nbavalue.models import SeasonStats


def season(**overrides) -> SeasonStats:
    data = {
        "season": "2024-25",
        "games_played": 50,
        "minutes": 1700,
        "points": 1250,
        "assists": 300,
        "rebounds": 400,
        "steals": 75,
        "blocks": 50,
        "turnovers": 150,
        "fg_made": 450,
        "fg_attempted": 950,
        "fg3_made": 100,
        "fg3_attempted": 280,
        "ft_made": 250,
        "ft_attempted": 300,
    }
    data.update(overrides)
    return SeasonStats(**data)


def three_seasons() -> list[SeasonStats]:
    return [
        season(),
        season(
            season="2023-24",
            games_played=70,
            minutes=2380,
            points=1680,
            assists=350,
            rebounds=490,
            steals=84,
            blocks=56,
            turnovers=175,
            fg_made=600,
            fg_attempted=1300,
            fg3_made=140,
            fg3_attempted=400,
            ft_made=340,
            ft_attempted=400,
        ),
        season(
            season="2022-23",
            games_played=65,
            minutes=2080,
            points=1430,
            assists=260,
            rebounds=455,
            steals=78,
            blocks=52,
            turnovers=143,
            fg_made=520,
            fg_attempted=1100,
            fg3_made=110,
            fg3_attempted=320,
            ft_made=280,
            ft_attempted=350,
        ),
    ]
