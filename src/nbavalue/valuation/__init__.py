"""Player valuation engine."""

from .impact import (
    SeasonImpactBreakdown,
    SeasonWeight,
    WeightedImpact,
    is_qualifying,
    scale_to_per36,
    season_impact,
    true_shooting_pct,
    weighted_impact,
)
from .market import (
    StockIndex,
    Trajectory,
    age_factor,
    fair_value,
    implied_score,
    stock_index,
    trajectory,
)
from .service import (
    CompensationComparison,
    PlayerHistory,
    ValuationExplanation,
    ValuationResult,
    compute_player_valuation,
    estimated_surplus_population,
    value_players,
)

__all__ = [
    "SeasonImpactBreakdown",
    "SeasonWeight",
    "WeightedImpact",
    "is_qualifying",
    "scale_to_per36",
    "season_impact",
    "true_shooting_pct",
    "weighted_impact",
    "StockIndex",
    "Trajectory",
    "age_factor",
    "fair_value",
    "implied_score",
    "stock_index",
    "trajectory",
    "CompensationComparison",
    "PlayerHistory",
    "ValuationExplanation",
    "ValuationResult",
    "compute_player_valuation",
    "estimated_surplus_population",
    "value_players",
]
