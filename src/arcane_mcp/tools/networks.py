from __future__ import annotations

from typing import Optional

from arcane_mcp.api import networks
from arcane_mcp.client import ArcaneClient
from arcane_mcp.resolve import resolve_environment_id
from arcane_mcp.tools._common import render_items, render_json


async def arcane_network_list(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """List all Docker networks in an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    page = await networks.list_networks(client, env_id)
    return render_items(page.items)


async def arcane_network_inspect(
    client: ArcaneClient,
    *,
    network_id: str,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Get details of a Docker network, including attached containers."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await networks.inspect_network(client, env_id, network_id)
    return render_json(result.data)


async def arcane_network_remove(
    client: ArcaneClient,
    *,
    network_id: str,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Remove a Docker network from an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await networks.remove_network(client, env_id, network_id)
    return result.message or f"Network '{network_id}' removed successfully"


async def arcane_network_prune(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Remove unused Docker networks from an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    report = (await networks.prune_networks(client, env_id)).data
    return f"Pruned {report.networks_deleted} networks"
