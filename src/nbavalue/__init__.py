"""Deterministic NBA player valuation engine."""

__version__ = "0.1.0"
