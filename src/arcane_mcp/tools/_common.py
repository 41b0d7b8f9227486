"""
Shared helpers for rendering API results as tool text.
"""

import json
from typing import Annotated, Any, Iterable

from pydantic import Field

from arcane_mcp.models import WireModel

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

# Out-of-range values are rejected when FastMCP validates tool arguments.
Limit = Annotated[int, Field(ge=1, le=MAX_LIMIT)]


def _plain(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_display()
    return value


def render_json(value: Any) -> str:
    return json.dumps(_plain(value), indent=2)


def render_items(items: Iterable[WireModel]) -> str:
    return json.dumps([item.to_display() for item in items], indent=2)
