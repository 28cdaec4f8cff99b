"""Plan catalog and static fixtures behind the IPlanCatalog protocol."""

from __future__ import annotations

from benefitwise.catalog.memory_catalog import DEFAULT_PLANS, MemoryPlanCatalog


def create_catalog() -> MemoryPlanCatalog:
    """Create the plan catalog used by the tools and the API."""
    return MemoryPlanCatalog(DEFAULT_PLANS)


__all__ = ["DEFAULT_PLANS", "MemoryPlanCatalog", "create_catalog"]
