"""Plan comparison output models."""

from __future__ import annotations

from benefitwise.models.base import WireModel
from benefitwise.models.plan import Plan


class PlanComparison(Plan):
    """A compared plan annotated with its cost figures."""

    annual_premium: float
    total_max_cost: float
    estimated_annual_cost: int
    value_score: int  # lower is better
    is_recommended: bool = False


class ComparisonSummary(WireModel):
    lowest_premium: float
    highest_premium: float
    average_premium: int
    lowest_deductible: float
    highest_deductible: float
    potential_savings: int


class PlanRecommendation(WireModel):
    plan_name: str
    reason: str
    estimated_annual_savings: int


class PlanComparisonResult(WireModel):
    plan_type: str
    plans: list[PlanComparison]
    summary: ComparisonSummary
    recommendations: list[PlanRecommendation]

    @property
    def recommended(self) -> list[PlanComparison]:
        return [p for p in self.plans if p.is_recommended]
