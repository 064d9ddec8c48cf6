"""Calibration constants and process settings."""

from .calibration import (
    DEFAULT_CONFIG,
    AgingCurve,
    ImpactWeights,
    SalaryCalibration,
    StockIndexRules,
    ValuationConfig,
)
from .settings import Settings, load_settings

__all__ = [
    "DEFAULT_CONFIG",
    "AgingCurve",
    "ImpactWeights",
    "SalaryCalibration",
    "StockIndexRules",
    "ValuationConfig",
    "Settings",
    "load_settings",
]
