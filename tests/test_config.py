import pytest

from nbavalue.config import DEFAULT_CONFIG, SalaryCalibration, ValuationConfig, load_settings
from nbavalue.config.settings import CONTRACTS_PATH_ENV, DEFAULT_AGE_ENV, LOG_LEVEL_ENV


def test_default_weights_exposed_for_inspection():
    weights = DEFAULT_CONFIG.weights.as_dict()
    assert weights["points_per36"] == 0.35
    assert weights["turnover_penalty"] == 0.05
    assert DEFAULT_CONFIG.recency_weights == (0.6, 0.3, 0.1)
    assert DEFAULT_CONFIG.aging.peak_range == "26-28"


def test_salary_calibration_line():
    calibration = SalaryCalibration()
    assert calibration.slope == pytest.approx((55_000_000 - 8_500_000) / 17.0)
    assert calibration.intercept + calibration.slope * 8.0 == pytest.approx(8_500_000)
    assert calibration.cap == pytest.approx(60_500_000)


def test_config_rejects_degenerate_anchors():
    with pytest.raises(ValueError):
        ValuationConfig(salary=SalaryCalibration(median_score=10.0, top_score=10.0))
    with pytest.raises(ValueError):
        ValuationConfig(recency_weights=())


def test_load_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(CONTRACTS_PATH_ENV, str(tmp_path / "salaries.csv"))
    monkeypatch.setenv(DEFAULT_AGE_ENV, "27")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    settings = load_settings()
    assert settings.contracts_path == tmp_path / "salaries.csv"
    assert settings.default_age == 27
    assert settings.log_level == "DEBUG"


def test_load_settings_falls_back_on_invalid_values(monkeypatch):
    monkeypatch.delenv(CONTRACTS_PATH_ENV, raising=False)
    monkeypatch.setenv(DEFAULT_AGE_ENV, "old")
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

    settings = load_settings()
    assert settings.contracts_path.name == "contracts.csv"
    assert settings.default_age == 25
    assert settings.log_level == "INFO"
