"""Age adjustment, salary calibration, trajectory and stock index ranking."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from nbavalue.config import DEFAULT_CONFIG, ValuationConfig
from nbavalue.valuation.impact import SeasonWeight


Trajectory = Literal["rising", "stable", "declining", "unknown"]


@dataclass(frozen=True)
class StockIndex:
    stock_index: float
    percentile_rank: float
    trajectory_bonus: float
    population_size: int


def age_factor(age: int, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    """1.0 across the peak range, stepping up below it and down above it."""

    curve = config.aging
    if curve.peak_min <= age <= curve.peak_max:
        return 1.0
    if age < curve.peak_min:
        bonus = min((curve.peak_min - age) * curve.young_bonus_per_year, curve.max_adjustment)
        return 1.0 + bonus
    penalty = min((age - curve.peak_max) * curve.old_penalty_per_year, curve.max_adjustment)
    return 1.0 - penalty


def fair_value(adjusted_score: float, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    """Map an adjusted impact score onto the two-anchor salary line."""

    calibration = config.salary
    value = calibration.slope * adjusted_score + calibration.intercept
    return max(calibration.min_salary, min(value, calibration.cap))


def implied_score(salary: float, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    """Invert the salary line: the score a salary would be fair for."""

    calibration = config.salary
    return (salary - calibration.intercept) / calibration.slope


def trajectory(
    seasons: Sequence[SeasonWeight],
    config: ValuationConfig = DEFAULT_CONFIG,
) -> Trajectory:
    """Two-point comparison of the latest two qualifying seasons.

    Known limitation: a single season-over-season delta, not a fitted trend.
    """

    if len(seasons) < 2:
        return "unknown"
    recent = seasons[0].impact_score
    previous = seasons[1].impact_score
    threshold = config.stock_index.trajectory_threshold_pct
    if previous == 0:
        if recent > 0:
            return "rising"
        if recent < 0:
            return "declining"
        return "stable"
    change_pct = (recent - previous) / abs(previous) * 100
    if change_pct > threshold:
        return "rising"
    if change_pct < -threshold:
        return "declining"
    return "stable"


def trajectory_bonus(label: Trajectory, config: ValuationConfig = DEFAULT_CONFIG) -> float:
    rules = config.stock_index
    if label == "rising":
        return rules.rising_bonus
    if label == "declining":
        return rules.declining_penalty
    return 0.0


def stock_index(
    surplus_value: Optional[float],
    population: Sequence[float],
    label: Trajectory,
    config: ValuationConfig = DEFAULT_CONFIG,
) -> StockIndex:
    """Percentile of ``surplus_value`` within ``population`` plus a trajectory nudge.

    Without a surplus value the neutral index is returned with no bonus. An
    empty population ranks at the neutral percentile.
    """

    rules = config.stock_index
    if surplus_value is None:
        return StockIndex(
            stock_index=rules.neutral_index,
            percentile_rank=rules.neutral_index,
            trajectory_bonus=0.0,
            population_size=len(population),
        )

    sorted_values = sorted(population)
    if sorted_values:
        below = bisect_left(sorted_values, surplus_value)
        percentile = below / len(sorted_values) * 100
    else:
        percentile = rules.neutral_index

    bonus = trajectory_bonus(label, config)
    index = max(0.0, min(100.0, percentile + bonus))
    return StockIndex(
        stock_index=index,
        percentile_rank=percentile,
        trajectory_bonus=bonus,
        population_size=len(sorted_values),
    )
