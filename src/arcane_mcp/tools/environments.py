from __future__ import annotations

from typing import Optional

from arcane_mcp.api import environments
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import EnvironmentCreate, EnvironmentUpdate, ListOptions
from arcane_mcp.resolve import resolve_environment_id
from arcane_mcp.tools._common import DEFAULT_LIMIT, Limit, render_items, render_json


async def arcane_environment_list(
    client: ArcaneClient,
    *,
    search: Optional[str] = None,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    """
    List all Docker environments managed by Arcane.
    Returns environment IDs, names, and connection status.
    """
    page = await environments.list_environments(
        client, ListOptions(search=search, limit=limit)
    )
    return render_items(page.items)


async def arcane_environment_get(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Get details of a specific environment by ID or name."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await environments.get_environment(client, env_id)
    return render_json(result.data)


async def arcane_environment_create(
    client: ArcaneClient,
    *,
    name: str,
    api_url: str,
    access_token: Optional[str] = None,
    bootstrap_token: Optional[str] = None,
    enabled: Optional[bool] = None,
    is_edge: Optional[bool] = None,
    use_api_key: Optional[bool] = None,
) -> str:
    """Register a new Docker environment (remote host or agent)."""
    dto = EnvironmentCreate(
        name=name,
        api_url=api_url,
        access_token=access_token,
        bootstrap_token=bootstrap_token,
        enabled=enabled,
        is_edge=is_edge,
        use_api_key=use_api_key,
    )
    result = await environments.create_environment(client, dto)
    return f"Environment created successfully:\n{render_json(result.data)}"


async def arcane_environment_update(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    name: Optional[str] = None,
    api_url: Optional[str] = None,
    access_token: Optional[str] = None,
    bootstrap_token: Optional[str] = None,
    enabled: Optional[bool] = None,
    regenerate_api_key: Optional[bool] = None,
) -> str:
    """Update an existing environment; only the given fields change."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    dto = EnvironmentUpdate(
        name=name,
        api_url=api_url,
        access_token=access_token,
        bootstrap_token=bootstrap_token,
        enabled=enabled,
        regenerate_api_key=regenerate_api_key,
    )
    result = await environments.update_environment(client, env_id, dto)
    return f"Environment updated successfully:\n{render_json(result.data)}"


async def arcane_environment_delete(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Delete an environment from Arcane."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await environments.delete_environment(client, env_id)
    return result.message or "Environment deleted successfully"
