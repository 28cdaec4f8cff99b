"""Savings projection input and output models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from benefitwise.core.types import CalculationType, Timeframe, Urgency
from benefitwise.models.base import MAX_AMOUNT, WireModel


class FinancialSituation(WireModel):
    """One side (current or proposed) of a savings comparison.

    Missing amounts count as zero; a missing tax bracket takes the configured default.
    """

    monthly_premium: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    annual_deductible: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    monthly_contribution: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    tax_bracket: Optional[float] = Field(default=None, ge=0, le=1)
    annual_income: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    expenses: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)


class AdditionalFactors(WireModel):
    employer_match: Optional[float] = Field(default=None, ge=0, le=10)  # match rate, 0.5 = 50%
    compound_interest_rate: Optional[float] = Field(default=None, ge=0, le=1)
    inflation_rate: Optional[float] = Field(default=None, ge=0, le=1)
    family_size: Optional[int] = Field(default=None, ge=1, le=10)


class BreakdownItem(WireModel):
    item: str
    amount: float


class SavingsRecommendation(WireModel):
    action: str
    impact: str
    urgency: Urgency


class SavingsResult(WireModel):
    calculation_type: CalculationType
    timeframe: Timeframe
    current_annual_cost: float = 0
    proposed_annual_cost: float = 0
    annual_savings: float = 0
    total_savings: float = 0
    tax_savings: float = 0
    net_savings: float = 0
    breakdown: list[BreakdownItem] = Field(default_factory=list)
    recommendations: list[SavingsRecommendation] = Field(default_factory=list)
    assumptions: list[str] = Field(default_factory=list)
