"""BenefitWise exception hierarchy."""

from __future__ import annotations

from typing import Any


class BenefitWiseError(Exception):
    """Base exception for all BenefitWise errors."""


class ValidationFailedError(BenefitWiseError):
    """Input rejected before any computation.

    ``errors`` holds every violation found, each as ``{"loc", "msg", "type"}``.
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        summary = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ())) or '<root>'}: {e.get('msg', '')}"
            for e in errors
        )
        super().__init__(f"{len(errors)} validation error(s): {summary}")

    @classmethod
    def from_pydantic(cls, exc: Any) -> "ValidationFailedError":
        """Build from a pydantic ``ValidationError``, keeping all violations."""
        return cls(
            [
                {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                for err in exc.errors()
            ]
        )


class UnknownToolError(BenefitWiseError):
    """No tool registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name!r}")


class PlanNotFoundError(BenefitWiseError):
    """Plan name not present in the plan catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Plan not found: {name!r}")
