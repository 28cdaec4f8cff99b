"""SavingsProjector: tax savings, employer match and growth for benefit changes.

Supported calculation types:

- hsa: pre-tax contribution delta, federal + payroll tax savings, invested growth
- fsa: same tax savings, no growth (use-it-or-lose-it)
- planChange: premium delta plus a deductible-based usage proxy
- retirement: pre-tax contribution delta, capped employer match, invested growth
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from benefitwise.calculators.rounding import round_cents, round_dollars
from benefitwise.core.config import AppSettings, SavingsConfig
from benefitwise.core.types import CalculationType, Timeframe, Urgency
from benefitwise.models.savings import (
    AdditionalFactors,
    BreakdownItem,
    FinancialSituation,
    SavingsRecommendation,
    SavingsResult,
)

logger = logging.getLogger(__name__)

TIMEFRAME_YEARS: dict[str, int] = {"annual": 1, "5year": 5, "10year": 10, "30year": 30}

RECOMMENDED_ACTIONS: dict[str, str] = {
    "hsa": "Maximize HSA contributions",
    "retirement": "Increase retirement contributions",
    "planChange": "Switch to recommended plan",
    "fsa": "Optimize FSA contributions",
}

DISCLAIMER = "Calculations are estimates based on current tax law and typical usage patterns"


def future_value(annual_amount: float, rate: float, years: int) -> float:
    """Value of ``annual_amount`` contributed yearly for ``years`` at ``rate``.

    Falls back to plain accumulation when the rate is exactly zero.
    """
    if rate == 0:
        return annual_amount * years
    return annual_amount * (((1 + rate) ** years - 1) / rate)


def urgency(annual_savings: float, config: SavingsConfig) -> Urgency:
    if annual_savings > config.high_urgency_threshold:
        return "high"
    if annual_savings > config.medium_urgency_threshold:
        return "medium"
    return "low"


@dataclass(frozen=True)
class _Inputs:
    """Resolved inputs with documented defaults applied."""

    current: FinancialSituation
    proposed: FinancialSituation
    timeframe: Timeframe
    years: int
    config: SavingsConfig
    tax_bracket: float
    growth_rate: float
    match_rate: float

    @classmethod
    def resolve(
        cls,
        current: FinancialSituation,
        proposed: FinancialSituation,
        timeframe: Timeframe,
        factors: AdditionalFactors,
        config: SavingsConfig,
    ) -> "_Inputs":
        return cls(
            current=current,
            proposed=proposed,
            timeframe=timeframe,
            years=TIMEFRAME_YEARS[timeframe],
            config=config,
            tax_bracket=(
                current.tax_bracket if current.tax_bracket is not None else config.default_tax_bracket
            ),
            growth_rate=(
                factors.compound_interest_rate
                if factors.compound_interest_rate is not None
                else config.default_growth_rate
            ),
            match_rate=factors.employer_match or 0.0,
        )

    def contribution_delta(self) -> float:
        current = (self.current.monthly_contribution or 0) * 12
        proposed = (self.proposed.monthly_contribution or 0) * 12
        return proposed - current


def _hsa(inp: _Inputs, result: SavingsResult) -> None:
    delta = inp.contribution_delta()
    tax = delta * inp.tax_bracket
    payroll = delta * inp.config.payroll_tax_rate
    annual = tax + payroll
    fv = future_value(delta, inp.growth_rate, inp.years)

    result.current_annual_cost = (inp.current.monthly_contribution or 0) * 12
    result.proposed_annual_cost = (inp.proposed.monthly_contribution or 0) * 12
    result.annual_savings = round_cents(annual)
    result.total_savings = round_dollars(fv + annual * inp.years)
    result.tax_savings = round_dollars(annual)
    result.net_savings = round_dollars(delta - annual)
    result.breakdown = [
        BreakdownItem(item="Additional HSA Contribution", amount=round_cents(delta)),
        BreakdownItem(item="Federal Tax Savings", amount=round_dollars(tax)),
        BreakdownItem(item="Payroll Tax Savings", amount=round_dollars(payroll)),
        BreakdownItem(item=f"Investment Growth (over {inp.timeframe})", amount=round_dollars(fv - delta * inp.years)),
    ]


def _fsa(inp: _Inputs, result: SavingsResult) -> None:
    delta = inp.contribution_delta()
    tax = delta * inp.tax_bracket
    payroll = delta * inp.config.payroll_tax_rate
    annual = round_dollars(tax + payroll)

    result.current_annual_cost = (inp.current.monthly_contribution or 0) * 12
    result.proposed_annual_cost = (inp.proposed.monthly_contribution or 0) * 12
    result.annual_savings = annual
    result.total_savings = annual * inp.years
    result.tax_savings = annual
    result.net_savings = round_dollars(delta - (tax + payroll))
    result.breakdown = [
        BreakdownItem(item="Additional FSA Contribution", amount=round_dollars(delta)),
        BreakdownItem(item="Federal Tax Savings", amount=round_dollars(tax)),
        BreakdownItem(item="Payroll Tax Savings", amount=round_dollars(payroll)),
        BreakdownItem(item="Net Cost After Tax Savings", amount=round_dollars(delta - (tax + payroll))),
    ]


def _plan_change(inp: _Inputs, result: SavingsResult) -> None:
    factor = inp.config.plan_change_usage_factor
    current_premium = (inp.current.monthly_premium or 0) * 12
    proposed_premium = (inp.proposed.monthly_premium or 0) * 12
    current_usage = (inp.current.annual_deductible or 0) * factor
    proposed_usage = (inp.proposed.annual_deductible or 0) * factor
    current_total = current_premium + current_usage
    proposed_total = proposed_premium + proposed_usage
    annual = round_dollars(current_total - proposed_total)

    result.current_annual_cost = round_dollars(current_total)
    result.proposed_annual_cost = round_dollars(proposed_total)
    result.annual_savings = annual
    result.total_savings = annual * inp.years
    result.breakdown = [
        BreakdownItem(item="Premium Savings", amount=round_dollars(current_premium - proposed_premium)),
        BreakdownItem(item="Deductible Difference Impact", amount=round_dollars(current_usage - proposed_usage)),
        BreakdownItem(item="Net Annual Savings", amount=annual),
    ]


def _retirement(inp: _Inputs, result: SavingsResult) -> None:
    delta = inp.contribution_delta()
    tax = delta * inp.tax_bracket
    match = min(delta * inp.match_rate, delta)
    invested = delta + match
    fv = future_value(invested, inp.growth_rate, inp.years)

    result.current_annual_cost = (inp.current.monthly_contribution or 0) * 12
    result.proposed_annual_cost = (inp.proposed.monthly_contribution or 0) * 12
    result.annual_savings = round_dollars(tax + match)
    result.total_savings = round_dollars(fv)
    result.tax_savings = round_dollars(tax)
    result.net_savings = round_dollars(delta - tax)
    result.breakdown = [
        BreakdownItem(item="Additional Contribution", amount=round_dollars(delta)),
        BreakdownItem(item="Tax Savings", amount=round_dollars(tax)),
        BreakdownItem(item="Employer Match", amount=round_dollars(match)),
        BreakdownItem(item=f"Investment Growth (over {inp.timeframe})", amount=round_dollars(fv - invested * inp.years)),
    ]


_BRANCHES: dict[str, Callable[[_Inputs, SavingsResult], None]] = {
    "hsa": _hsa,
    "fsa": _fsa,
    "planChange": _plan_change,
    "retirement": _retirement,
}


def project(
    kind: CalculationType,
    current: FinancialSituation,
    proposed: FinancialSituation,
    timeframe: Timeframe = "annual",
    factors: AdditionalFactors | None = None,
    settings: AppSettings | None = None,
) -> SavingsResult:
    """Project the savings of moving from ``current`` to ``proposed``."""
    config = (settings or AppSettings()).savings
    inp = _Inputs.resolve(current, proposed, timeframe, factors or AdditionalFactors(), config)

    result = SavingsResult(calculation_type=kind, timeframe=timeframe)
    _BRANCHES[kind](inp, result)

    result.recommendations = [
        SavingsRecommendation(
            action=RECOMMENDED_ACTIONS[kind],
            impact=f"Save ${round_dollars(abs(result.annual_savings)):,} annually",
            urgency=urgency(result.annual_savings, config),
        )
    ]
    result.assumptions = [
        f"Tax bracket: {inp.tax_bracket * 100:.0f}%",
        f"Investment return: {inp.growth_rate * 100:.1f}%",
        f"Timeframe: {timeframe}",
        DISCLAIMER,
    ]
    logger.debug(
        "Projected %s over %s: annual=%.2f total=%.2f",
        kind, timeframe, result.annual_savings, result.total_savings,
    )
    return result
