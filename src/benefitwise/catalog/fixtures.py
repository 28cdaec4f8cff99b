"""Static chat-surface fixtures: dashboard, quick actions, mock comparison plans."""

from __future__ import annotations

from benefitwise.models.dashboard import (
    BenefitsDashboard,
    CoverageItem,
    Deadline,
    HealthPlanUsage,
    PlanSummary,
    QuickAction,
)
from benefitwise.models.plan import PlanType

QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction(label="My Dashboard", prompt="Show my benefits dashboard"),
    QuickAction(label="Compare Plans", prompt="Compare health insurance plans"),
    QuickAction(label="Cost Calculator", prompt="Show me the cost calculator"),
    QuickAction(label="Open Enrollment", prompt="What are the open enrollment deadlines?"),
    QuickAction(label="HSA Info", prompt="Tell me about HSA benefits and contribution limits"),
    QuickAction(label="Help", prompt="What can you help me with regarding my benefits?"),
)

CALCULATOR_MESSAGE = (
    "Here's an interactive cost calculator to help estimate your benefits costs. "
    "Fill out the form to get personalized estimates."
)

# Per-member monthly premiums; scaled by family size when served.
MOCK_COMPARISON_PLANS: tuple[PlanSummary, ...] = (
    PlanSummary(
        name="Essential HMO",
        type=PlanType.HMO,
        monthly_premium=450,
        deductible=1500,
        out_of_pocket_max=3000,
        features=["Low premiums", "Primary care required", "Network only"],
    ),
    PlanSummary(
        name="Choice PPO",
        type=PlanType.PPO,
        monthly_premium=650,
        deductible=1000,
        out_of_pocket_max=5000,
        features=["Any doctor", "No referrals", "Out-of-network coverage"],
    ),
    PlanSummary(
        name="Saver HDHP",
        type=PlanType.HDHP,
        monthly_premium=350,
        deductible=3000,
        out_of_pocket_max=6000,
        features=["HSA eligible", "Lowest premiums", "Preventive care covered"],
    ),
)


def default_dashboard() -> BenefitsDashboard:
    """Mock dashboard for the signed-in member."""
    return BenefitsDashboard(
        health_plan=HealthPlanUsage(
            name="Choice PPO Plan",
            deductible_used=750,
            deductible_total=1500,
            out_of_pocket_used=1200,
            out_of_pocket_max=5000,
        ),
        coverage_types=[
            CoverageItem(type="Medical", status="active", monthly_premium=450),
            CoverageItem(type="Dental", status="active", monthly_premium=45),
            CoverageItem(type="Vision", status="active", monthly_premium=15),
            CoverageItem(type="Life", status="active", monthly_premium=25),
            CoverageItem(type="401k", status="active", monthly_premium=0),
            CoverageItem(type="Disability", status="not-enrolled", monthly_premium=0),
        ],
        upcoming_deadlines=[
            Deadline(event="Open Enrollment Ends", date="November 15, 2024", days_remaining=14),
            Deadline(event="FSA Claim Deadline", date="December 31, 2024", days_remaining=60),
            Deadline(event="401k Contribution Limit", date="December 31, 2024", days_remaining=60),
        ],
    )
