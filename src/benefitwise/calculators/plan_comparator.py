"""PlanComparator: side-by-side annual cost, value score and recommendation."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from benefitwise.calculators.rounding import round_dollars
from benefitwise.core.config import AppSettings, ComparatorConfig
from benefitwise.core.exceptions import ValidationFailedError
from benefitwise.models.comparison import (
    ComparisonSummary,
    PlanComparison,
    PlanComparisonResult,
    PlanRecommendation,
)
from benefitwise.models.plan import Plan, UserProfile

logger = logging.getLogger(__name__)

MIN_PLANS = 2
MAX_PLANS = 4

RECOMMENDATION_REASONS = {
    "high": "Best for high medical usage - lowest maximum out-of-pocket",
    "low": "Best for low medical usage - lowest monthly premium",
    None: "Best overall value - optimal balance of premium and coverage",
}


def estimated_annual_cost(plan: Plan, usage: Optional[str], config: ComparatorConfig) -> float:
    """Annual cost under a fixed utilization assumption per usage tier."""
    annual_premium = plan.monthly_premium * 12
    primary = plan.copay_primary_doc or 0
    if usage == "high":
        return annual_premium + plan.max_out_of_pocket * config.high_usage_oop_factor
    if usage == "moderate":
        specialist = plan.copay_specialist or 0
        return (
            annual_premium
            + plan.deductible * config.moderate_deductible_factor
            + primary * config.moderate_primary_visits
            + specialist * config.moderate_specialist_visits
        )
    return annual_premium + primary * config.low_primary_visits


def value_score(estimated: float, total_max_cost: float) -> int:
    if total_max_cost <= 0:
        return 0
    return round_dollars(estimated * 100 / total_max_cost)


def _annotate(plan: Plan, usage: Optional[str], config: ComparatorConfig) -> PlanComparison:
    annual_premium = plan.monthly_premium * 12
    total_max_cost = annual_premium + plan.max_out_of_pocket
    estimated = estimated_annual_cost(plan, usage, config)
    return PlanComparison(
        **plan.model_dump(),
        annual_premium=annual_premium,
        total_max_cost=total_max_cost,
        estimated_annual_cost=round_dollars(estimated),
        value_score=value_score(estimated, total_max_cost),
    )


def _first_min(plans: Sequence[PlanComparison], key: Callable[[PlanComparison], float]) -> int:
    """Index of the first plan holding the minimum ``key``."""
    best = 0
    for i, plan in enumerate(plans):
        if key(plan) < key(plans[best]):
            best = i
    return best


def recommended_index(plans: Sequence[PlanComparison], usage: Optional[str]) -> int:
    if usage == "high":
        return _first_min(plans, lambda p: p.max_out_of_pocket)
    if usage == "low":
        return _first_min(plans, lambda p: p.monthly_premium)
    return _first_min(plans, lambda p: p.value_score)


def compare(
    plan_type: str,
    plans: Sequence[Plan],
    user_profile: UserProfile | None = None,
    settings: AppSettings | None = None,
) -> PlanComparisonResult:
    """Compare 2-4 plans, cheapest estimated annual cost first.

    Exactly one plan is flagged as recommended when a profile is given, none otherwise.
    """
    if not MIN_PLANS <= len(plans) <= MAX_PLANS:
        raise ValidationFailedError([
            {
                "loc": ["plans"],
                "msg": f"expected between {MIN_PLANS} and {MAX_PLANS} plans, got {len(plans)}",
                "type": "plan_count",
            }
        ])
    config = (settings or AppSettings()).comparator
    usage = user_profile.expected_medical_usage if user_profile else None

    # sorted() is stable: equal costs keep their input order
    compared = sorted(
        (_annotate(p, usage, config) for p in plans),
        key=lambda p: p.estimated_annual_cost,
    )

    if user_profile is not None:
        idx = recommended_index(compared, usage)
        compared[idx] = compared[idx].model_copy(update={"is_recommended": True})

    costliest = compared[-1].estimated_annual_cost
    premiums = [p.monthly_premium for p in compared]
    deductibles = [p.deductible for p in compared]
    summary = ComparisonSummary(
        lowest_premium=min(premiums),
        highest_premium=max(premiums),
        average_premium=round_dollars(sum(premiums) / len(premiums)),
        lowest_deductible=min(deductibles),
        highest_deductible=max(deductibles),
        potential_savings=costliest - compared[0].estimated_annual_cost,
    )

    reason = RECOMMENDATION_REASONS.get(usage, RECOMMENDATION_REASONS[None])
    recommendations = [
        PlanRecommendation(
            plan_name=p.name,
            reason=reason,
            estimated_annual_savings=costliest - p.estimated_annual_cost,
        )
        for p in compared
        if p.is_recommended
    ]

    logger.debug(
        "Compared %d %s plans (usage=%s): recommended=%s",
        len(compared), plan_type, usage, [r.plan_name for r in recommendations],
    )
    return PlanComparisonResult(
        plan_type=plan_type,
        plans=compared,
        summary=summary,
        recommendations=recommendations,
    )
