"""Tests for the in-memory plan catalog."""

from __future__ import annotations

import pytest

from benefitwise.catalog import DEFAULT_PLANS, create_catalog
from benefitwise.core.exceptions import PlanNotFoundError
from benefitwise.core.protocols import IPlanCatalog
from tests.fakes import MemoryPlanCatalog, make_catalog_plan


def test_satisfies_protocol():
    assert isinstance(create_catalog(), IPlanCatalog)


def test_lists_default_plans_in_order():
    assert create_catalog().list_plans() == list(DEFAULT_PLANS)


def test_get_plan():
    plan = create_catalog().get_plan("BasicCare HMO")
    assert plan.premium == 350
    assert plan.copays.prescription == 15


def test_missing_plan_raises():
    with pytest.raises(PlanNotFoundError) as exc_info:
        create_catalog().get_plan("Gold")
    assert exc_info.value.name == "Gold"


def test_later_plan_with_same_name_wins():
    catalog = MemoryPlanCatalog([make_catalog_plan("A", 100, 0, 0), make_catalog_plan("A", 200, 0, 0)])
    assert [p.premium for p in catalog.list_plans()] == [200]
