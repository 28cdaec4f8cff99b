"""Static dashboard and chat-surface fixture models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import ConfigDict, Field, computed_field

from benefitwise.models.base import MAX_AMOUNT, WireModel
from benefitwise.models.plan import PlanType


def _progress(used: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return round(used / total * 100, 1)


class HealthPlanUsage(WireModel):
    name: str
    deductible_used: float = Field(ge=0, le=MAX_AMOUNT)
    deductible_total: float = Field(ge=0, le=MAX_AMOUNT)
    out_of_pocket_used: float = Field(ge=0, le=MAX_AMOUNT)
    out_of_pocket_max: float = Field(ge=0, le=MAX_AMOUNT)

    @computed_field(alias="deductibleProgress")  # type: ignore[prop-decorator]
    @property
    def deductible_progress(self) -> float:
        return _progress(self.deductible_used, self.deductible_total)

    @computed_field(alias="outOfPocketProgress")  # type: ignore[prop-decorator]
    @property
    def out_of_pocket_progress(self) -> float:
        return _progress(self.out_of_pocket_used, self.out_of_pocket_max)


class CoverageItem(WireModel):
    type: str
    status: Literal["active", "not-enrolled"]
    monthly_premium: float = 0


class Deadline(WireModel):
    event: str
    date: str
    days_remaining: int


class BenefitsDashboard(WireModel):
    health_plan: HealthPlanUsage
    coverage_types: list[CoverageItem]
    upcoming_deadlines: list[Deadline]

    @computed_field(alias="totalMonthlyPremium")  # type: ignore[prop-decorator]
    @property
    def total_monthly_premium(self) -> float:
        return sum(c.monthly_premium for c in self.coverage_types if c.status == "active")


class CalculatorSignal(WireModel):
    show_calculator: bool = True
    initial_plan: Optional[str] = None
    message: str


class QuickAction(WireModel):
    label: str
    prompt: str


class QuickEstimateBreakdown(WireModel):
    premiums: int
    estimated_out_of_pocket: int
    total: int


class QuickEstimate(WireModel):
    estimated_annual_cost: int
    breakdown: QuickEstimateBreakdown


class PlanSummary(WireModel):
    """Plan card shown by the mock comparison tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: PlanType
    monthly_premium: float
    deductible: float
    out_of_pocket_max: float
    features: list[str] = Field(default_factory=list)
