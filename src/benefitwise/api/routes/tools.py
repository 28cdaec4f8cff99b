"""Tool discovery and invocation endpoints for the chat surface."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from benefitwise.skills.benefits_tools import TOOLS, invoke_tool

router = APIRouter(tags=["tools"])


@router.get("")
async def list_tools() -> list[dict[str, Any]]:
    """Return every tool with its input JSON schema."""
    return [tool.schema() for tool in TOOLS.values()]


@router.post("/{name}")
def call_tool(name: str, request: Request, payload: dict[str, Any] | None = Body(default=None)) -> dict[str, Any]:
    """Validate the payload and run the named tool."""
    return invoke_tool(name, payload, request.app.state.tool_context)
