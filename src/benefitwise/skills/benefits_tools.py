"""Benefits tools invoked by name from the chat surface.

Every tool validates its whole payload before computing anything and returns
a JSON-ready dict with camelCase keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from benefitwise.calculators import cost_estimator, plan_comparator, savings_projector
from benefitwise.calculators.rounding import round_dollars
from benefitwise.catalog import create_catalog
from benefitwise.catalog.fixtures import (
    CALCULATOR_MESSAGE,
    MOCK_COMPARISON_PLANS,
    QUICK_ACTIONS,
    default_dashboard,
)
from benefitwise.core.config import AppSettings
from benefitwise.core.exceptions import UnknownToolError, ValidationFailedError
from benefitwise.core.protocols import IPlanCatalog
from benefitwise.core.types import CalculationType, JsonDict, Timeframe, UsageTier
from benefitwise.models.base import WireModel
from benefitwise.models.dashboard import CalculatorSignal, QuickEstimate, QuickEstimateBreakdown
from benefitwise.models.estimate import UsageProfile
from benefitwise.models.plan import Plan, UserProfile
from benefitwise.models.savings import AdditionalFactors, FinancialSituation

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tool inputs
# ---------------------------------------------------------------------------

class CalculateCostInput(WireModel):
    plan_name: Optional[str] = None
    family_size: int = Field(default=1, ge=1, le=10)
    usage: UsageProfile = UsageProfile()


class ComparePlansInput(WireModel):
    plan_type: Literal["health", "dental", "vision", "retirement"]
    plans: list[Plan] = Field(min_length=2, max_length=4)
    user_profile: Optional[UserProfile] = None


class CalculateSavingsInput(WireModel):
    calculation_type: CalculationType
    current_situation: FinancialSituation
    proposed_situation: FinancialSituation
    timeframe: Timeframe = "annual"
    additional_factors: Optional[AdditionalFactors] = None


class QuickEstimateInput(WireModel):
    expected_medical_usage: UsageTier
    plan_type: str


class CompareBenefitsPlansInput(WireModel):
    plan_type: Literal["HMO", "PPO", "HDHP"]
    family_size: Optional[int] = Field(default=None, ge=1, le=10)


class DashboardInput(WireModel):
    user_id: Optional[str] = None


class CostCalculatorInput(WireModel):
    initial_plan: Optional[str] = None


class NoInput(WireModel):
    pass


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass
class ToolContext:
    """Collaborators shared by every tool call."""

    catalog: IPlanCatalog = field(default_factory=create_catalog)
    settings: AppSettings = field(default_factory=AppSettings)


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any, ToolContext], JsonDict]

    def parse(self, payload: JsonDict | None) -> BaseModel:
        try:
            return self.input_model.model_validate(payload or {})
        except ValidationError as exc:
            raise ValidationFailedError.from_pydantic(exc) from exc

    def invoke(self, payload: JsonDict | None, context: ToolContext | None = None) -> JsonDict:
        request = self.parse(payload)
        return self.handler(request, context or ToolContext())

    def schema(self) -> JsonDict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
        }


TOOLS: dict[str, Tool] = {}


def register(name: str, description: str, input_model: type[BaseModel]):
    """Register the decorated handler under ``name``."""

    def decorator(fn: Callable[[Any, ToolContext], JsonDict]) -> Callable[[Any, ToolContext], JsonDict]:
        TOOLS[name] = Tool(name=name, description=description, input_model=input_model, handler=fn)
        return fn

    return decorator


def get_tool(name: str) -> Tool:
    try:
        return TOOLS[name]
    except KeyError:
        raise UnknownToolError(name) from None


def invoke_tool(name: str, payload: JsonDict | None = None, context: ToolContext | None = None) -> JsonDict:
    """Validate ``payload`` against the tool's input model and run it."""
    tool = get_tool(name)
    try:
        result = tool.invoke(payload, context)
    except ValidationFailedError as exc:
        logger.warning("Tool %s rejected input: %s", name, exc)
        raise
    logger.info("Tool %s completed", name)
    return result


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

@register(
    "calculateCost",
    "Estimate annual premium and out-of-pocket cost for a catalog plan at an expected usage level",
    CalculateCostInput,
)
def calculate_cost(request: CalculateCostInput, ctx: ToolContext) -> JsonDict:
    candidates = ctx.catalog.list_plans()
    plan = ctx.catalog.get_plan(request.plan_name) if request.plan_name else None
    estimate = cost_estimator.estimate(plan, request.family_size, request.usage, candidates, ctx.settings)
    return {
        "estimate": estimate.to_wire() if estimate is not None else None,
        "allPlans": [
            e.to_wire()
            for e in cost_estimator.estimate_all(request.family_size, request.usage, candidates, ctx.settings)
        ],
    }


@register(
    "comparePlans",
    "Compare health insurance or benefits plans side-by-side with detailed analysis",
    ComparePlansInput,
)
def compare_plans(request: ComparePlansInput, ctx: ToolContext) -> JsonDict:
    result = plan_comparator.compare(request.plan_type, request.plans, request.user_profile, ctx.settings)
    return result.to_wire()


@register(
    "calculateSavings",
    "Calculate potential savings from benefits decisions like HSA contributions, "
    "plan changes, or retirement contributions",
    CalculateSavingsInput,
)
def calculate_savings(request: CalculateSavingsInput, ctx: ToolContext) -> JsonDict:
    result = savings_projector.project(
        request.calculation_type,
        request.current_situation,
        request.proposed_situation,
        request.timeframe,
        request.additional_factors,
        ctx.settings,
    )
    return result.to_wire()


QUICK_USAGE_MULTIPLIERS: dict[str, float] = {"low": 0.3, "moderate": 0.6, "high": 0.9}
QUICK_BASE_COST = 5000
QUICK_PREMIUMS = 5400
QUICK_BASE_OUT_OF_POCKET = 3000


@register("calculateBenefitsCost", "Calculate estimated annual benefits costs", QuickEstimateInput)
def calculate_benefits_cost(request: QuickEstimateInput, ctx: ToolContext) -> JsonDict:
    multiplier = QUICK_USAGE_MULTIPLIERS[request.expected_medical_usage]
    oop = round_dollars(QUICK_BASE_OUT_OF_POCKET * multiplier)
    return QuickEstimate(
        estimated_annual_cost=round_dollars(QUICK_BASE_COST * multiplier),
        breakdown=QuickEstimateBreakdown(
            premiums=QUICK_PREMIUMS,
            estimated_out_of_pocket=oop,
            total=QUICK_PREMIUMS + oop,
        ),
    ).to_wire()


@register("compareBenefitsPlans", "Compare health insurance plans", CompareBenefitsPlansInput)
def compare_benefits_plans(request: CompareBenefitsPlansInput, ctx: ToolContext) -> JsonDict:
    size = request.family_size or 1
    plans = [
        p.model_copy(update={"monthly_premium": p.monthly_premium * size})
        for p in MOCK_COMPARISON_PLANS
    ]
    return {"planType": request.plan_type, "plans": [p.to_wire() for p in plans]}


@register("showBenefitsDashboard", "Show a comprehensive benefits dashboard", DashboardInput)
def show_benefits_dashboard(request: DashboardInput, ctx: ToolContext) -> JsonDict:
    return default_dashboard().to_wire()


@register("showCostCalculator", "Show an interactive cost calculator for benefits", CostCalculatorInput)
def show_cost_calculator(request: CostCalculatorInput, ctx: ToolContext) -> JsonDict:
    signal = CalculatorSignal(initial_plan=request.initial_plan, message=CALCULATOR_MESSAGE)
    return signal.to_wire(exclude_none=False)


@register("listQuickActions", "List the suggested prompts shown under the chat input", NoInput)
def list_quick_actions(request: NoInput, ctx: ToolContext) -> JsonDict:
    return {"actions": [a.to_wire() for a in QUICK_ACTIONS]}
