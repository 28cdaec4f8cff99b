"""Shared test doubles and plan builders."""

from __future__ import annotations

from typing import Any

from benefitwise.catalog.memory_catalog import MemoryPlanCatalog
from benefitwise.models.plan import CatalogCopays, CatalogPlan, Plan


def make_plan(name: str, premium: float, deductible: float, max_oop: float, **extra: Any) -> Plan:
    """Comparison plan with sensible defaults for the optional fields."""
    return Plan(
        name=name,
        type=extra.pop("type", "PPO"),
        monthly_premium=premium,
        deductible=deductible,
        max_out_of_pocket=max_oop,
        **extra,
    )


def make_catalog_plan(
    name: str, premium: float, deductible: float, max_oop: float, **copays: float
) -> CatalogPlan:
    return CatalogPlan(
        name=name,
        type="other",
        premium=premium,
        deductible=deductible,
        max_oop=max_oop,
        copays=CatalogCopays(**copays),
    )


__all__ = ["MemoryPlanCatalog", "make_catalog_plan", "make_plan"]
