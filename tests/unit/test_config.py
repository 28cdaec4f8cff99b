"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from benefitwise.core.config import AppSettings, ComparatorConfig, EstimatorConfig, SavingsConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"


def test_estimator_config_defaults():
    config = EstimatorConfig()
    assert config.hospital_day_multiplier == 24
    assert config.prescription_months == 12
    assert config.average_surgery_cost == 2500


def test_comparator_config_defaults():
    config = ComparatorConfig()
    assert config.high_usage_oop_factor == 0.8
    assert config.moderate_deductible_factor == 0.6
    assert (config.moderate_primary_visits, config.moderate_specialist_visits) == (4, 2)
    assert config.low_primary_visits == 2


def test_savings_config_defaults():
    config = SavingsConfig()
    assert config.default_tax_bracket == 0.22
    assert config.default_growth_rate == 0.07
    assert config.payroll_tax_rate == 0.0765
    assert config.plan_change_usage_factor == 0.3


def test_savings_config_env_override(monkeypatch):
    monkeypatch.setenv("BENEFITWISE_SAVINGS_DEFAULT_TAX_BRACKET", "0.32")
    assert SavingsConfig().default_tax_bracket == 0.32


def test_app_settings_env_override(monkeypatch):
    monkeypatch.setenv("BENEFITWISE_ENVIRONMENT", "prod")
    assert AppSettings().environment == "prod"
