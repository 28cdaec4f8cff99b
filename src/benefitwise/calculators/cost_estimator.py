"""CostEstimator: annual cost of a catalog plan at a given usage level.

Out-of-pocket uses a two-tier cap rather than coinsurance blending:

- usage cost above the deductible: pay it, capped at the out-of-pocket max
- usage cost at or below the deductible: pay it, capped at the deductible
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from benefitwise.calculators.rounding import round_dollars
from benefitwise.catalog.memory_catalog import DEFAULT_PLANS
from benefitwise.core.config import AppSettings, EstimatorConfig
from benefitwise.models.estimate import CostBreakdown, CostEstimate, SavingsComparison, UsageProfile
from benefitwise.models.plan import CatalogPlan

logger = logging.getLogger(__name__)


def usage_breakdown(plan: CatalogPlan, usage: UsageProfile, config: EstimatorConfig) -> CostBreakdown:
    """Per-category member cost for a year of usage under ``plan``."""
    return CostBreakdown(
        doctor_visits=usage.doctor_visits * plan.copays.doctor,
        hospital_days=usage.hospital_days * plan.copays.hospital * config.hospital_day_multiplier,
        prescriptions=usage.prescriptions * plan.copays.prescription * config.prescription_months,
        surgeries=usage.surgeries * config.average_surgery_cost,
    )


def out_of_pocket(total_medical: float, deductible: float, max_oop: float) -> float:
    if total_medical > deductible:
        return min(total_medical, max_oop)
    return min(total_medical, deductible)


def _annual_total(plan: CatalogPlan, family_size: int, usage: UsageProfile, config: EstimatorConfig) -> float:
    medical = usage_breakdown(plan, usage, config).total
    return plan.premium * family_size * 12 + out_of_pocket(medical, plan.deductible, plan.max_oop)


def most_expensive(candidates: Iterable[CatalogPlan]) -> Optional[CatalogPlan]:
    """Highest-premium plan; the first one wins a tie."""
    best: Optional[CatalogPlan] = None
    for plan in candidates:
        if best is None or plan.premium > best.premium:
            best = plan
    return best


def estimate(
    plan: Optional[CatalogPlan],
    family_size: int,
    usage: UsageProfile,
    candidates: Optional[Sequence[CatalogPlan]] = None,
    settings: AppSettings | None = None,
) -> Optional[CostEstimate]:
    """Estimate a year of cost under ``plan``.

    Returns None when no plan is selected. Savings are reported against the
    highest-premium plan in ``candidates`` (the default catalog when omitted)
    at the same usage and family size.
    """
    if plan is None:
        return None
    config = (settings or AppSettings()).estimator

    monthly_premium = plan.premium * family_size
    annual_premium = monthly_premium * 12
    breakdown = usage_breakdown(plan, usage, config)
    oop = out_of_pocket(breakdown.total, plan.deductible, plan.max_oop)
    total = annual_premium + oop

    savings = None
    reference = most_expensive(DEFAULT_PLANS if candidates is None else candidates)
    if reference is not None and reference.name != plan.name:
        reference_total = _annual_total(reference, family_size, usage, config)
        amount = reference_total - total
        if amount > 0:
            savings = SavingsComparison(
                compared_to=reference.name,
                amount=round_dollars(amount),
                percentage=round_dollars(amount / reference_total * 100),
            )

    logger.debug("Estimated %s x%d: total=%.2f oop=%.2f", plan.name, family_size, total, oop)
    return CostEstimate(
        plan_name=plan.name,
        monthly_premium=monthly_premium,
        annual_premium=annual_premium,
        estimated_out_of_pocket=oop,
        total_estimated_cost=total,
        breakdown=breakdown,
        savings=savings,
    )


def estimate_all(
    family_size: int,
    usage: UsageProfile,
    candidates: Sequence[CatalogPlan],
    settings: AppSettings | None = None,
) -> list[CostEstimate]:
    """One estimate per candidate plan, in catalog order."""
    estimates = []
    for plan in candidates:
        result = estimate(plan, family_size, usage, candidates, settings)
        if result is not None:
            estimates.append(result)
    return estimates
