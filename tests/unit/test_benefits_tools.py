"""Tests for tool validation and dispatch."""

from __future__ import annotations

import pytest

from benefitwise.core.exceptions import PlanNotFoundError, UnknownToolError, ValidationFailedError
from benefitwise.skills.benefits_tools import TOOLS, ToolContext, get_tool, invoke_tool
from tests.fakes import MemoryPlanCatalog, make_catalog_plan

COMPARE_PAYLOAD = {
    "planType": "health",
    "plans": [
        {"name": "Saver", "type": "HDHP", "monthlyPremium": 300, "deductible": 2000, "maxOutOfPocket": 6000},
        {"name": "Premier", "type": "PPO", "monthlyPremium": 500, "deductible": 500, "maxOutOfPocket": 2000},
        {"name": "Local", "type": "EPO", "monthlyPremium": 400, "deductible": 1000, "maxOutOfPocket": 4000},
    ],
    "userProfile": {"expectedMedicalUsage": "high"},
}


class TestRegistry:
    def test_all_tools_registered(self):
        assert set(TOOLS) == {
            "calculateCost",
            "comparePlans",
            "calculateSavings",
            "calculateBenefitsCost",
            "compareBenefitsPlans",
            "showBenefitsDashboard",
            "showCostCalculator",
            "listQuickActions",
        }

    def test_unknown_tool(self):
        with pytest.raises(UnknownToolError):
            invoke_tool("bookAppointment", {})

    def test_schema_uses_wire_names(self):
        schema = get_tool("comparePlans").schema()
        assert schema["name"] == "comparePlans"
        assert "userProfile" in schema["inputSchema"]["properties"]


class TestValidation:
    def test_single_plan_rejected_before_computation(self):
        payload = {**COMPARE_PAYLOAD, "plans": COMPARE_PAYLOAD["plans"][:1]}
        with pytest.raises(ValidationFailedError) as exc_info:
            invoke_tool("comparePlans", payload)
        assert exc_info.value.errors[0]["loc"] == ["plans"]

    def test_reports_all_violations_at_once(self):
        payload = {
            "planType": "auto",
            "plans": [
                {"name": "A", "type": "HMO", "monthlyPremium": -1, "deductible": 0, "maxOutOfPocket": 0},
                {"name": "B", "type": "HMO", "monthlyPremium": 1, "deductible": "lots", "maxOutOfPocket": 0},
            ],
        }
        with pytest.raises(ValidationFailedError) as exc_info:
            invoke_tool("comparePlans", payload)
        locs = [tuple(e["loc"]) for e in exc_info.value.errors]
        assert ("planType",) in locs
        assert ("plans", 0, "monthlyPremium") in locs
        assert ("plans", 1, "deductible") in locs

    def test_unknown_calculation_type(self):
        with pytest.raises(ValidationFailedError):
            invoke_tool(
                "calculateSavings",
                {"calculationType": "lottery", "currentSituation": {}, "proposedSituation": {}},
            )

    def test_tax_bracket_out_of_range(self):
        with pytest.raises(ValidationFailedError):
            invoke_tool(
                "calculateSavings",
                {"calculationType": "hsa", "currentSituation": {"taxBracket": 22}, "proposedSituation": {}},
            )


class TestComparePlans:
    def test_returns_camel_case_result(self):
        result = invoke_tool("comparePlans", COMPARE_PAYLOAD)
        assert [p["name"] for p in result["plans"]] == ["Premier", "Local", "Saver"]
        assert result["plans"][0]["isRecommended"] is True
        assert result["recommendations"][0]["planName"] == "Premier"
        assert result["summary"]["potentialSavings"] == 800


class TestCalculateSavings:
    def test_default_timeframe_is_annual(self):
        result = invoke_tool(
            "calculateSavings",
            {
                "calculationType": "fsa",
                "currentSituation": {"monthlyContribution": 0},
                "proposedSituation": {"monthlyContribution": 200},
            },
        )
        assert result["timeframe"] == "annual"
        assert result["annualSavings"] == 712
        assert result["totalSavings"] == 712
        assert result["breakdown"][0] == {"item": "Additional FSA Contribution", "amount": 2400}


class TestCalculateCost:
    def test_estimate_for_named_plan(self):
        result = invoke_tool("calculateCost", {"planName": "HSA High Deductible", "usage": {"doctorVisits": 0}})
        assert result["estimate"]["totalEstimatedCost"] == 3000
        assert result["estimate"]["savings"]["comparedTo"] == "Choice PPO"
        assert len(result["allPlans"]) == 3

    def test_no_plan_selected(self):
        result = invoke_tool("calculateCost", {"familySize": 2})
        assert result["estimate"] is None
        assert [e["monthlyPremium"] for e in result["allPlans"]] == [700, 1100, 500]

    def test_unknown_plan(self):
        with pytest.raises(PlanNotFoundError):
            invoke_tool("calculateCost", {"planName": "Platinum Deluxe"})

    def test_uses_context_catalog(self):
        catalog = MemoryPlanCatalog([make_catalog_plan("Only", 100, 0, 0)])
        result = invoke_tool("calculateCost", {"planName": "Only"}, ToolContext(catalog=catalog))
        assert result["estimate"]["annualPremium"] == 1200
        assert "savings" not in result["estimate"]


class TestFixtureTools:
    @pytest.mark.parametrize(
        "usage, annual, oop",
        [("low", 1500, 900), ("moderate", 3000, 1800), ("high", 4500, 2700)],
    )
    def test_quick_estimate(self, usage, annual, oop):
        result = invoke_tool("calculateBenefitsCost", {"expectedMedicalUsage": usage, "planType": "PPO"})
        assert result["estimatedAnnualCost"] == annual
        assert result["breakdown"] == {"premiums": 5400, "estimatedOutOfPocket": oop, "total": 5400 + oop}

    def test_mock_plans_scale_with_family_size(self):
        result = invoke_tool("compareBenefitsPlans", {"planType": "HMO", "familySize": 2})
        premiums = {p["name"]: p["monthlyPremium"] for p in result["plans"]}
        assert premiums == {"Essential HMO": 900, "Choice PPO": 1300, "Saver HDHP": 700}

    def test_mock_plans_default_to_single_member(self):
        result = invoke_tool("compareBenefitsPlans", {"planType": "PPO"})
        assert result["plans"][0]["monthlyPremium"] == 450

    def test_mock_plans_use_card_field_names(self):
        plan = invoke_tool("compareBenefitsPlans", {"planType": "HDHP"})["plans"][2]
        assert plan["outOfPocketMax"] == 6000
        assert plan["features"][0] == "HSA eligible"
        assert "maxOutOfPocket" not in plan
        assert "specialFeatures" not in plan

    def test_dashboard(self):
        result = invoke_tool("showBenefitsDashboard", {"userId": "u-1"})
        assert result["healthPlan"]["deductibleProgress"] == 50.0
        assert result["healthPlan"]["outOfPocketProgress"] == 24.0
        assert result["totalMonthlyPremium"] == 535
        assert len(result["upcomingDeadlines"]) == 3

    def test_cost_calculator_signal(self):
        assert invoke_tool("showCostCalculator", None) == {
            "showCalculator": True,
            "initialPlan": None,
            "message": (
                "Here's an interactive cost calculator to help estimate your benefits costs. "
                "Fill out the form to get personalized estimates."
            ),
        }
        assert invoke_tool("showCostCalculator", {"initialPlan": "HMO"})["initialPlan"] == "HMO"

    def test_quick_actions(self):
        actions = invoke_tool("listQuickActions")["actions"]
        assert len(actions) == 6
        assert actions[0] == {"label": "My Dashboard", "prompt": "Show my benefits dashboard"}


def test_tools_satisfy_protocol():
    from benefitwise.core.protocols import ITool

    assert all(isinstance(tool, ITool) for tool in TOOLS.values())
