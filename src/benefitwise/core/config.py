"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class EstimatorConfig(BaseSettings):
    """Cost estimator multipliers."""

    model_config = {"env_prefix": "BENEFITWISE_ESTIMATOR_"}

    hospital_day_multiplier: float = 24.0
    prescription_months: int = 12
    average_surgery_cost: float = 2500.0  # after insurance


class ComparatorConfig(BaseSettings):
    """Usage-tier utilization assumptions for plan comparison."""

    model_config = {"env_prefix": "BENEFITWISE_COMPARATOR_"}

    high_usage_oop_factor: float = 0.8
    moderate_deductible_factor: float = 0.6
    moderate_primary_visits: int = 4
    moderate_specialist_visits: int = 2
    low_primary_visits: int = 2


class SavingsConfig(BaseSettings):
    """Defaults and rates for savings projections."""

    model_config = {"env_prefix": "BENEFITWISE_SAVINGS_"}

    default_tax_bracket: float = 0.22
    default_growth_rate: float = 0.07
    payroll_tax_rate: float = 0.0765  # Social Security + Medicare
    plan_change_usage_factor: float = 0.3
    high_urgency_threshold: float = 1000.0
    medium_urgency_threshold: float = 500.0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "BENEFITWISE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    estimator: EstimatorConfig = EstimatorConfig()
    comparator: ComparatorConfig = ComparatorConfig()
    savings: SavingsConfig = SavingsConfig()
