"""Fixed calibration constants for the valuation model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class ImpactWeights:
    points: float = 0.35
    assists: float = 0.20
    rebounds: float = 0.15
    steals: float = 0.10
    blocks: float = 0.10
    true_shooting: float = 0.10
    # Subtracted once per turnover per 36 minutes.
    turnover_penalty: float = 0.05

    def as_dict(self) -> Dict[str, float]:
        return {
            "points_per36": self.points,
            "assists_per36": self.assists,
            "rebounds_per36": self.rebounds,
            "steals_per36": self.steals,
            "blocks_per36": self.blocks,
            "true_shooting_pct": self.true_shooting,
            "turnover_penalty": self.turnover_penalty,
        }


@dataclass(frozen=True)
class AgingCurve:
    peak_min: int = 26
    peak_max: int = 28
    young_bonus_per_year: float = 0.005
    old_penalty_per_year: float = 0.01
    max_adjustment: float = 0.10

    @property
    def peak_range(self) -> str:
        return f"{self.peak_min}-{self.peak_max}"


@dataclass(frozen=True)
class SalaryCalibration:
    """Two anchors on the score-to-salary line (2024-25 league values)."""

    median_salary: float = 8_500_000
    top_salary: float = 55_000_000
    median_score: float = 8.0
    top_score: float = 25.0
    min_salary: float = 1_000_000
    cap_ratio: float = 1.1

    @property
    def slope(self) -> float:
        return (self.top_salary - self.median_salary) / (self.top_score - self.median_score)

    @property
    def intercept(self) -> float:
        return self.median_salary - self.slope * self.median_score

    @property
    def cap(self) -> float:
        return self.top_salary * self.cap_ratio


@dataclass(frozen=True)
class StockIndexRules:
    neutral_index: float = 50.0
    rising_bonus: float = 5.0
    declining_penalty: float = -5.0
    trajectory_threshold_pct: float = 10.0


@dataclass(frozen=True)
class ValuationConfig:
    weights: ImpactWeights = field(default_factory=ImpactWeights)
    recency_weights: Tuple[float, ...] = (0.6, 0.3, 0.1)
    min_games: int = 10
    min_minutes: float = 100.0
    aging: AgingCurve = field(default_factory=AgingCurve)
    salary: SalaryCalibration = field(default_factory=SalaryCalibration)
    stock_index: StockIndexRules = field(default_factory=StockIndexRules)

    def __post_init__(self) -> None:
        if not self.recency_weights:
            raise ValueError("recency_weights must not be empty")
        if self.salary.top_score == self.salary.median_score:
            raise ValueError("salary calibration anchors must use distinct scores")


DEFAULT_CONFIG = ValuationConfig()
