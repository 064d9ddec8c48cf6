"""Lightweight REST client for the nbavalue API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_seasons(path: Path) -> list[dict]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid seasons JSON: {exc}") from exc
    if not isinstance(data, list):
        raise SystemExit("seasons file must contain a JSON list of season totals")
    return data


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the nbavalue REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("seasons", type=Path, nargs="?", help="JSON list of season totals")
    parser.add_argument("--player-id", help="Player identifier to value")
    parser.add_argument("--season", help="Target season, e.g. 2024-25")
    parser.add_argument("--age", type=int, default=None, help="Player age for the target season")
    parser.add_argument("--contracts", metavar="SEASON", help="List compensation records for a season and exit")
    parser.add_argument("--reload", action="store_true", help="Reload the server's compensation table and exit")
    parser.add_argument("--health", action="store_true", help="Check the API health endpoint and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.health:
            resp = client.get("/health")
            resp.raise_for_status()
            print(f"API status: {resp.json()['status']}")
            return
        if args.reload:
            resp = client.post("/contracts/reload")
            resp.raise_for_status()
            print(f"Reloaded {resp.json()['records']} compensation records")
            return
        if args.contracts:
            resp = client.get(f"/contracts/{args.contracts}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.seasons is None or not args.player_id or not args.season:
            raise SystemExit("seasons file, --player-id and --season are required unless using --health/--contracts/--reload")

        payload = {
            "player_id": args.player_id,
            "season": args.season,
            "age": args.age,
            "seasons": load_seasons(args.seasons),
        }
        resp = client.post("/valuation", json=payload)
        if resp.status_code == 400:
            raise SystemExit(f"valuation rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        result = resp.json()
        print(
            f"Stock index {result['stock_index']:.1f} ({result['trajectory']}), "
            f"fair value {result['fair_value']:,.0f}"
        )
        print(json.dumps(result["explanation"], indent=2))


if __name__ == "__main__":
    main()
