"""Shared base model: snake_case attributes, camelCase on the wire."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Upper bounds on caller-supplied amounts and counts; keeps every derived figure finite.
MAX_AMOUNT = 10_000_000
MAX_COUNT = 10_000


class WireModel(BaseModel):
    """Accepts either field names or camelCase aliases; dumps by alias.

    Non-finite numbers (``inf``, ``nan``) are rejected on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    def to_wire(self, *, exclude_none: bool = True) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=exclude_none)
