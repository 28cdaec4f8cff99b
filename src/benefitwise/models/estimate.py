"""Cost calculator input and output models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from benefitwise.models.base import MAX_COUNT, WireModel


class UsageProfile(WireModel):
    """Expected annual usage. Defaults match the calculator's initial sliders."""

    doctor_visits: int = Field(default=6, ge=0, le=MAX_COUNT)
    hospital_days: int = Field(default=0, ge=0, le=MAX_COUNT)
    prescriptions: int = Field(default=2, ge=0, le=MAX_COUNT)
    surgeries: int = Field(default=0, ge=0, le=MAX_COUNT)


class CostBreakdown(WireModel):
    doctor_visits: float = 0
    hospital_days: float = 0
    prescriptions: float = 0
    surgeries: float = 0

    @property
    def total(self) -> float:
        return self.doctor_visits + self.hospital_days + self.prescriptions + self.surgeries


class SavingsComparison(WireModel):
    """Savings against the highest-premium plan in the candidate set."""

    compared_to: str
    amount: int
    percentage: int


class CostEstimate(WireModel):
    plan_name: str
    monthly_premium: float
    annual_premium: float
    estimated_out_of_pocket: float
    total_estimated_cost: float
    breakdown: CostBreakdown
    savings: Optional[SavingsComparison] = None
