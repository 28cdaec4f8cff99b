"""Protocol interfaces for BenefitWise collaborators.

Structural typing, no inheritance required, easy to swap in tests.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from benefitwise.models.plan import CatalogPlan


# ---------------------------------------------------------------------------
# Plan data source
# ---------------------------------------------------------------------------

@runtime_checkable
class IPlanCatalog(Protocol):
    """Source of the plans offered by the cost calculator."""

    def list_plans(self) -> list[CatalogPlan]: ...

    def get_plan(self, name: str) -> CatalogPlan: ...


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

@runtime_checkable
class ITool(Protocol):
    """A named request/response tool invoked by the chat surface."""

    name: str
    description: str

    def invoke(self, payload: dict[str, Any]) -> dict[str, Any]: ...
