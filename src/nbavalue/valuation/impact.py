"""Per-36 normalization, shooting efficiency and impact scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from pydantic import BaseModel
from pydantic.config import ConfigDict

from nbavalue.config import DEFAULT_CONFIG, ValuationConfig
from nbavalue.models import SeasonStats


MINUTES_BASIS = 36.0
# Average free throws consumed per shooting possession.
FREE_THROW_POSSESSION_FACTOR = 0.44


class SeasonImpactBreakdown(BaseModel):
    """Every figure behind one season's raw impact score."""

    season: str
    points_per36: float
    assists_per36: float
    rebounds_per36: float
    steals_per36: float
    blocks_per36: float
    turnovers_per36: float
    true_shooting_pct: float

    points_component: float
    assists_component: float
    rebounds_component: float
    steals_component: float
    blocks_component: float
    true_shooting_component: float
    turnover_penalty: float

    raw_impact_score: float

    model_config = ConfigDict(frozen=True)


class SeasonWeight(BaseModel):
    season: str
    weight: float
    normalized_weight: float
    impact_score: float

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class WeightedImpact:
    score: float
    seasons: List[SeasonWeight]


def scale_to_per36(stat: float, minutes: float) -> float:
    if minutes == 0:
        return 0.0
    return (stat / minutes) * MINUTES_BASIS


def true_shooting_pct(points: float, fg_attempted: float, ft_attempted: float) -> float:
    """TS% = PTS / (2 * (FGA + 0.44 * FTA)); zero when there were no attempts."""

    denominator = 2 * (fg_attempted + FREE_THROW_POSSESSION_FACTOR * ft_attempted)
    if denominator == 0:
        return 0.0
    return points / denominator


def season_impact(stats: SeasonStats, config: ValuationConfig = DEFAULT_CONFIG) -> SeasonImpactBreakdown:
    weights = config.weights
    minutes = stats.minutes

    points_per36 = scale_to_per36(stats.points, minutes)
    assists_per36 = scale_to_per36(stats.assists, minutes)
    rebounds_per36 = scale_to_per36(stats.rebounds, minutes)
    steals_per36 = scale_to_per36(stats.steals, minutes)
    blocks_per36 = scale_to_per36(stats.blocks, minutes)
    turnovers_per36 = scale_to_per36(stats.turnovers, minutes)
    ts_pct = true_shooting_pct(stats.points, stats.fg_attempted, stats.ft_attempted)

    points_component = points_per36 * weights.points
    assists_component = assists_per36 * weights.assists
    rebounds_component = rebounds_per36 * weights.rebounds
    steals_component = steals_per36 * weights.steals
    blocks_component = blocks_per36 * weights.blocks
    # TS% enters on a 0-100 scale so its weight is comparable to the counting stats.
    true_shooting_component = ts_pct * 100 * weights.true_shooting
    turnover_penalty = turnovers_per36 * weights.turnover_penalty

    raw_impact_score = (
        points_component
        + assists_component
        + rebounds_component
        + steals_component
        + blocks_component
        + true_shooting_component
        - turnover_penalty
    )

    return SeasonImpactBreakdown(
        season=stats.season,
        points_per36=points_per36,
        assists_per36=assists_per36,
        rebounds_per36=rebounds_per36,
        steals_per36=steals_per36,
        blocks_per36=blocks_per36,
        turnovers_per36=turnovers_per36,
        true_shooting_pct=ts_pct,
        points_component=points_component,
        assists_component=assists_component,
        rebounds_component=rebounds_component,
        steals_component=steals_component,
        blocks_component=blocks_component,
        true_shooting_component=true_shooting_component,
        turnover_penalty=turnover_penalty,
        raw_impact_score=raw_impact_score,
    )


def is_qualifying(stats: SeasonStats, config: ValuationConfig = DEFAULT_CONFIG) -> bool:
    return stats.games_played >= config.min_games and stats.minutes >= config.min_minutes


def weighted_impact(
    seasons: Iterable[SeasonStats],
    config: ValuationConfig = DEFAULT_CONFIG,
) -> WeightedImpact:
    """Blend the most recent qualifying seasons with the recency weights.

    Seasons below the games/minutes thresholds are skipped before weights are
    assigned, and the blend is divided by the weight actually used so short
    careers are not penalized.
    """

    ordered = sorted(seasons, key=lambda stats: stats.season, reverse=True)
    qualifying = [stats for stats in ordered if is_qualifying(stats, config)]
    selected = qualifying[: len(config.recency_weights)]

    scored = [
        (stats.season, weight, season_impact(stats, config).raw_impact_score)
        for stats, weight in zip(selected, config.recency_weights)
    ]
    total_weight = sum(weight for _, weight, _ in scored)
    if total_weight <= 0:
        return WeightedImpact(score=0.0, seasons=[])

    score = sum(weight * impact for _, weight, impact in scored) / total_weight
    breakdown = [
        SeasonWeight(
            season=season,
            weight=weight,
            normalized_weight=weight / total_weight,
            impact_score=impact,
        )
        for season, weight, impact in scored
    ]
    return WeightedImpact(score=score, seasons=breakdown)
