from __future__ import annotations

from typing import List, Optional

from arcane_mcp.api import templates
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ListOptions, TemplateCreate, TemplateUpdate
from arcane_mcp.tools._common import DEFAULT_LIMIT, Limit, render_items, render_json


async def arcane_template_list(
    client: ArcaneClient,
    *,
    search: Optional[str] = None,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    """List all Docker Compose templates."""
    page = await templates.list_templates(
        client, ListOptions(search=search, limit=limit)
    )
    return render_items(page.items)


async def arcane_template_get(client: ArcaneClient, *, template_id: str) -> str:
    """Get a Docker Compose template by ID."""
    result = await templates.get_template(client, template_id)
    return render_json(result.data)


async def arcane_template_create(
    client: ArcaneClient,
    *,
    name: str,
    compose_content: str,
    env_content: Optional[str] = None,
    description: Optional[str] = None,
    category: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> str:
    """Create a reusable Docker Compose template."""
    dto = TemplateCreate(
        name=name,
        compose_content=compose_content,
        env_content=env_content,
        description=description,
        category=category,
        tags=tags,
    )
    result = await templates.create_template(client, dto)
    return f"Template created successfully:\n{render_json(result.data)}"


async def arcane_template_update(
    client: ArcaneClient,
    *,
    template_id: str,
    name: Optional[str] = None,
    compose_content: Optional[str] = None,
    env_content: Optional[str] = None,
    description: Optional[str] = None,
    category: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> str:
    """Update a Docker Compose template; only the given fields change."""
    dto = TemplateUpdate(
        name=name,
        compose_content=compose_content,
        env_content=env_content,
        description=description,
        category=category,
        tags=tags,
    )
    result = await templates.update_template(client, template_id, dto)
    return f"Template updated successfully:\n{render_json(result.data)}"


async def arcane_template_delete(client: ArcaneClient, *, template_id: str) -> str:
    """Delete a Docker Compose template."""
    result = await templates.delete_template(client, template_id)
    return result.message or "Template deleted successfully"
