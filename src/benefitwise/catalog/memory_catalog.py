"""In-memory plan catalog: dict-backed stand-in for the employer's plan source."""

from __future__ import annotations

from typing import Iterable

from benefitwise.core.exceptions import PlanNotFoundError
from benefitwise.models.plan import CatalogCopays, CatalogPlan, PlanType

DEFAULT_PLANS: tuple[CatalogPlan, ...] = (
    CatalogPlan(
        name="BasicCare HMO",
        type=PlanType.HMO,
        premium=350,
        deductible=1500,
        max_oop=3000,
        copays=CatalogCopays(doctor=25, specialist=50, hospital=150, prescription=15),
        features=["Low premiums", "Primary care required", "Network only"],
    ),
    CatalogPlan(
        name="Choice PPO",
        type=PlanType.PPO,
        premium=550,
        deductible=1000,
        max_oop=5000,
        copays=CatalogCopays(doctor=30, specialist=60, hospital=200, prescription=20),
        features=["Any doctor", "No referrals", "Out-of-network coverage"],
    ),
    CatalogPlan(
        name="HSA High Deductible",
        type=PlanType.HDHP,
        premium=250,
        deductible=3000,
        max_oop=6000,
        copays=CatalogCopays(),
        features=["HSA eligible", "Lowest premiums", "Preventive care covered"],
    ),
)


class MemoryPlanCatalog:
    """Dict-backed IPlanCatalog. Preserves insertion order."""

    def __init__(self, plans: Iterable[CatalogPlan] = DEFAULT_PLANS) -> None:
        self._plans: dict[str, CatalogPlan] = {p.name: p for p in plans}

    def list_plans(self) -> list[CatalogPlan]:
        return list(self._plans.values())

    def get_plan(self, name: str) -> CatalogPlan:
        try:
            return self._plans[name]
        except KeyError:
            raise PlanNotFoundError(name) from None
