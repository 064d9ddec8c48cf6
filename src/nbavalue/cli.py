"""Command-line interface for valuing a single player."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List

from nbavalue.config import load_settings
from nbavalue.ingest import (
    CompensationIndex,
    age_from_birthdate,
    current_season,
    season_stats_from_result_set,
)
from nbavalue.models import SeasonStats
from nbavalue.valuation import (
    ValuationResult,
    compute_player_valuation,
    estimated_surplus_population,
)


_TRAJECTORY_MARKERS = {
    "rising": "^",
    "stable": "=",
    "declining": "v",
    "unknown": "?",
}


def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute an NBA player valuation from season totals")
    parser.add_argument("stats", type=Path, help="JSON file: list of season totals or a provider career payload")
    parser.add_argument("--player-id", required=True, help="Player identifier used for compensation lookup")
    parser.add_argument("--season", default=None, help="Target season, e.g. 2024-25 (defaults to current)")
    parser.add_argument("--age", type=int, default=None, help="Player age for the target season")
    parser.add_argument("--birthdate", default=None, help="Birthdate (YYYY-MM-DD) used when --age is omitted")
    parser.add_argument(
        "--contracts",
        type=Path,
        default=None,
        help="Compensation CSV (defaults to NBAVALUE_CONTRACTS_PATH or data/contracts.csv)",
    )
    parser.add_argument(
        "--estimate-population",
        action="store_true",
        help="Rank against surplus values estimated from the season's compensation table",
    )
    parser.add_argument("--json", action="store_true", help="Print the full valuation as JSON")
    return parser.parse_args(argv)


def load_season_stats(path: Path) -> List[SeasonStats]:
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return season_stats_from_result_set(data)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of seasons or a result-set payload")
    return [SeasonStats.model_validate(item) for item in data]


def format_currency(value: float) -> str:
    if abs(value) >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if abs(value) >= 1_000:
        return f"${value / 1_000:.0f}K"
    return f"${value:.0f}"


def render_summary(result: ValuationResult) -> str:
    lines = [
        f"Player {result.player_id} - {result.season} (age {result.player_age})",
        f"Impact score: current {result.current_season_impact_score:.2f}, "
        f"weighted {result.weighted_impact_score:.2f}, adjusted {result.adjusted_impact_score:.2f} "
        f"(x{result.age_factor:.3f})",
        f"Fair value: {format_currency(result.fair_value)}",
    ]
    if result.compensation is not None:
        lines.append(
            f"Actual value: {format_currency(result.compensation.actual_value)}, "
            f"surplus {format_currency(result.compensation.surplus_value)}"
        )
    else:
        lines.append("Actual value: not on record")
    lines.append(
        f"Stock index: {result.stock_index:.1f} "
        f"[{_TRAJECTORY_MARKERS[result.trajectory]} {result.trajectory}]"
    )
    for entry in result.explanation.recency_weights:
        lines.append(
            f"  {entry.season}: impact {entry.impact_score:.2f} weight {entry.normalized_weight:.2f}"
        )
    return "\n".join(lines)


def main(argv: List[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    season = args.season or current_season()
    seasons = load_season_stats(args.stats)
    age = args.age
    if age is None:
        age = age_from_birthdate(args.birthdate)

    index = CompensationIndex.from_csv(args.contracts or settings.contracts_path)
    population = None
    if args.estimate_population:
        population = estimated_surplus_population(index.for_season(season))

    result = compute_player_valuation(
        args.player_id,
        seasons,
        season,
        age,
        compensation=index,
        comparison_surplus=population,
        default_age=settings.default_age,
    )

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        print(render_summary(result))


if __name__ == "__main__":
    main()
