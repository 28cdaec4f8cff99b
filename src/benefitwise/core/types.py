"""Type aliases used across BenefitWise."""

from __future__ import annotations

from typing import Any, Literal

JsonDict = dict[str, Any]

UsageTier = Literal["low", "moderate", "high"]
CalculationType = Literal["hsa", "planChange", "retirement", "fsa"]
Timeframe = Literal["annual", "5year", "10year", "30year"]
Urgency = Literal["high", "medium", "low"]
