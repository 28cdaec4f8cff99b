"""Stateless benefit cost calculators."""

from __future__ import annotations

from benefitwise.calculators.cost_estimator import estimate, estimate_all
from benefitwise.calculators.plan_comparator import compare
from benefitwise.calculators.savings_projector import future_value, project

__all__ = ["compare", "estimate", "estimate_all", "future_value", "project"]
