"""Plan and member profile models supplied by the chat surface or the catalog."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Optional

from pydantic import ConfigDict, Field

from benefitwise.models.base import MAX_AMOUNT, WireModel


class PlanType(StrEnum):
    HMO = "HMO"
    PPO = "PPO"
    EPO = "EPO"
    POS = "POS"
    HDHP = "HDHP"
    OTHER = "other"


class Plan(WireModel):
    """A plan offered for side-by-side comparison. Never mutated."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: PlanType
    monthly_premium: float = Field(ge=0, le=MAX_AMOUNT)
    deductible: float = Field(ge=0, le=MAX_AMOUNT)
    max_out_of_pocket: float = Field(ge=0, le=MAX_AMOUNT)
    copay_primary_doc: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    copay_specialist: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    copay_emergency_room: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    coinsurance: Optional[float] = Field(default=None, ge=0, le=1)
    prescription_coverage: Optional[str] = None
    network_size: Optional[Literal["small", "medium", "large"]] = None
    special_features: list[str] = Field(default_factory=list)


class CatalogCopays(WireModel):
    """Flat per-service fees used by the cost calculator."""

    model_config = ConfigDict(frozen=True)

    doctor: float = Field(default=0, ge=0, le=MAX_AMOUNT)
    specialist: float = Field(default=0, ge=0, le=MAX_AMOUNT)
    hospital: float = Field(default=0, ge=0, le=MAX_AMOUNT)
    prescription: float = Field(default=0, ge=0, le=MAX_AMOUNT)


class CatalogPlan(WireModel):
    """A plan in the employer's catalog, as offered by the cost calculator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: PlanType
    premium: float = Field(ge=0, le=MAX_AMOUNT)  # monthly, per covered member
    deductible: float = Field(ge=0, le=MAX_AMOUNT)
    max_oop: float = Field(ge=0, le=MAX_AMOUNT, alias="maxOOP")
    copays: CatalogCopays = CatalogCopays()
    features: list[str] = Field(default_factory=list)


class UserProfile(WireModel):
    """Optional member profile; drives the recommendation policy only."""

    age: Optional[int] = Field(default=None, ge=0, le=120)
    has_family: Optional[bool] = None
    chronic_conditions: list[str] = Field(default_factory=list)
    expected_medical_usage: Optional[Literal["low", "moderate", "high"]] = None
    monthly_budget: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    preferred_doctors: list[str] = Field(default_factory=list)
