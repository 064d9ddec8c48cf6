"""Canonical input models shared across ingestion and valuation layers."""

from .stats import SEASON_PATTERN, CompensationRecord, SeasonStats

__all__ = ["SEASON_PATTERN", "CompensationRecord", "SeasonStats"]
