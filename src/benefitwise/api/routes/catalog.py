"""Plan catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["catalog"])


@router.get("/plans")
async def list_plans(request: Request) -> list[dict]:
    """Return the plans offered by the cost calculator."""
    catalog = request.app.state.tool_context.catalog
    return [plan.to_wire() for plan in catalog.list_plans()]


@router.get("/plans/{name}")
async def get_plan(name: str, request: Request) -> dict:
    """Return a single catalog plan by exact name."""
    catalog = request.app.state.tool_context.catalog
    return catalog.get_plan(name).to_wire()
