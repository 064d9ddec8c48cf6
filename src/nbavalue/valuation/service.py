"""Compose the scoring stages into a full, auditable player valuation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from nbavalue.config import DEFAULT_CONFIG, ValuationConfig
from nbavalue.ingest.contracts import CompensationIndex
from nbavalue.models import CompensationRecord, SeasonStats
from nbavalue.valuation.impact import (
    SeasonImpactBreakdown,
    SeasonWeight,
    season_impact,
    weighted_impact,
)
from nbavalue.valuation.market import (
    Trajectory,
    age_factor,
    fair_value,
    implied_score,
    stock_index,
    trajectory,
)


logger = logging.getLogger(__name__)

FALLBACK_AGE = 25


class CompensationComparison(BaseModel):
    """Actual salary and the surplus it leaves; present together or not at all."""

    actual_value: float
    surplus_value: float

    model_config = ConfigDict(frozen=True)


class AgingExplanation(BaseModel):
    age: int
    peak_age_range: str
    adjustment_percent: float

    model_config = ConfigDict(frozen=True)


class FairValueExplanation(BaseModel):
    method: str = "linear_interpolation"
    median_salary: float
    top_salary: float
    median_score: float
    top_score: float
    slope: float
    intercept: float
    floor: float
    cap: float

    model_config = ConfigDict(frozen=True)


class StockIndexExplanation(BaseModel):
    surplus_value: Optional[float]
    percentile_rank: float
    trajectory_bonus: float
    population_size: int

    model_config = ConfigDict(frozen=True)


class ValuationExplanation(BaseModel):
    impact_weights: Dict[str, float]
    current_season: Optional[SeasonImpactBreakdown]
    recency_weights: List[SeasonWeight]
    aging: AgingExplanation
    fair_value: FairValueExplanation
    stock_index: StockIndexExplanation

    model_config = ConfigDict(frozen=True)


class ValuationResult(BaseModel):
    player_id: str
    season: str
    player_age: int
    current_season_impact_score: float
    weighted_impact_score: float
    age_factor: float
    adjusted_impact_score: float
    fair_value: float
    compensation: Optional[CompensationComparison] = None
    stock_index: float = Field(..., ge=0.0, le=100.0)
    trajectory: Trajectory
    explanation: ValuationExplanation

    model_config = ConfigDict(frozen=True)

    @property
    def actual_value(self) -> Optional[float]:
        return self.compensation.actual_value if self.compensation else None

    @property
    def surplus_value(self) -> Optional[float]:
        return self.compensation.surplus_value if self.compensation else None


@dataclass(frozen=True)
class PlayerHistory:
    """One player's inputs for a batch valuation."""

    player_id: str
    seasons: Sequence[SeasonStats]
    age: Optional[int] = None


def _resolve_age(
    age: Optional[int],
    seasons: Sequence[SeasonStats],
    season: str,
    default_age: int,
) -> int:
    if age is not None:
        return age
    for stats in seasons:
        if stats.season == season and stats.age is not None:
            return stats.age
    return default_age


def _fair_value_explanation(config: ValuationConfig) -> FairValueExplanation:
    calibration = config.salary
    return FairValueExplanation(
        median_salary=calibration.median_salary,
        top_salary=calibration.top_salary,
        median_score=calibration.median_score,
        top_score=calibration.top_score,
        slope=calibration.slope,
        intercept=calibration.intercept,
        floor=calibration.min_salary,
        cap=calibration.cap,
    )


def compute_player_valuation(
    player_id: str,
    seasons: Sequence[SeasonStats],
    season: str,
    age: Optional[int] = None,
    *,
    compensation: Optional[CompensationIndex] = None,
    comparison_surplus: Optional[Sequence[float]] = None,
    config: ValuationConfig = DEFAULT_CONFIG,
    default_age: int = FALLBACK_AGE,
) -> ValuationResult:
    """Value one player for ``season``.

    ``comparison_surplus`` is the caller's snapshot of other players' surplus
    values for the same season; it is only read. Without a compensation index
    (or a record for this player/season) the result carries no compensation
    and a neutral stock index.
    """

    seasons = list(seasons)
    player_age = _resolve_age(age, seasons, season, default_age)

    current_stats = next((stats for stats in seasons if stats.season == season), None)
    current_breakdown = season_impact(current_stats, config) if current_stats else None
    current_score = current_breakdown.raw_impact_score if current_breakdown else 0.0

    blended = weighted_impact(seasons, config)
    factor = age_factor(player_age, config)
    adjusted = blended.score * factor
    fair = fair_value(adjusted, config)

    record: Optional[CompensationRecord] = None
    if compensation is not None:
        record = compensation.get(player_id, season)
    comparison: Optional[CompensationComparison] = None
    # A zero salary is a placeholder row, not a contract.
    if record is not None and record.salary > 0:
        comparison = CompensationComparison(
            actual_value=float(record.salary),
            surplus_value=fair - record.salary,
        )

    label = trajectory(blended.seasons, config)
    ranking = stock_index(
        comparison.surplus_value if comparison else None,
        comparison_surplus or (),
        label,
        config,
    )

    logger.debug(
        "Valued player %s for %s: adjusted=%.3f fair=%.0f index=%.1f trajectory=%s",
        player_id,
        season,
        adjusted,
        fair,
        ranking.stock_index,
        label,
    )

    return ValuationResult(
        player_id=player_id,
        season=season,
        player_age=player_age,
        current_season_impact_score=current_score,
        weighted_impact_score=blended.score,
        age_factor=factor,
        adjusted_impact_score=adjusted,
        fair_value=fair,
        compensation=comparison,
        stock_index=ranking.stock_index,
        trajectory=label,
        explanation=ValuationExplanation(
            impact_weights=config.weights.as_dict(),
            current_season=current_breakdown,
            recency_weights=blended.seasons,
            aging=AgingExplanation(
                age=player_age,
                peak_age_range=config.aging.peak_range,
                adjustment_percent=(factor - 1) * 100,
            ),
            fair_value=_fair_value_explanation(config),
            stock_index=StockIndexExplanation(
                surplus_value=comparison.surplus_value if comparison else None,
                percentile_rank=ranking.percentile_rank,
                trajectory_bonus=ranking.trajectory_bonus,
                population_size=ranking.population_size,
            ),
        ),
    )


def estimated_surplus_population(
    records: Iterable[CompensationRecord],
    config: ValuationConfig = DEFAULT_CONFIG,
) -> List[float]:
    """Approximate surplus values using only the compensation table.

    Each salary is mapped to the score it implies, then back through the
    clamped fair-value line; the result only reflects the floor and cap, not
    on-court performance. Prefer :func:`value_players` when season stats for
    the population are available.
    """

    return [
        fair_value(implied_score(record.salary, config), config) - record.salary
        for record in records
    ]


def value_players(
    histories: Iterable[PlayerHistory],
    season: str,
    *,
    compensation: Optional[CompensationIndex] = None,
    config: ValuationConfig = DEFAULT_CONFIG,
    default_age: int = FALLBACK_AGE,
) -> List[ValuationResult]:
    """Value a population, ranking each player against the other players' true surplus."""

    histories = list(histories)
    first_pass = [
        compute_player_valuation(
            history.player_id,
            history.seasons,
            season,
            history.age,
            compensation=compensation,
            config=config,
            default_age=default_age,
        )
        for history in histories
    ]
    surplus = [result.surplus_value for result in first_pass]
    logger.info(
        "Ranking %s players for %s against %s surplus values",
        len(histories),
        season,
        sum(1 for value in surplus if value is not None),
    )

    def others(position: int) -> List[float]:
        return [
            value
            for other, value in enumerate(surplus)
            if other != position and value is not None
        ]

    return [
        compute_player_valuation(
            history.player_id,
            history.seasons,
            season,
            history.age,
            compensation=compensation,
            comparison_surplus=others(position),
            config=config,
            default_age=default_age,
        )
        for position, history in enumerate(histories)
    ]
