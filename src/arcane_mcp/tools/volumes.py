from __future__ import annotations

from typing import Optional

from arcane_mcp.api import volumes
from arcane_mcp.client import ArcaneClient
from arcane_mcp.resolve import resolve_environment_id
from arcane_mcp.tools._common import render_items, render_json


async def arcane_volume_list(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """List all Docker volumes in an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    page = await volumes.list_volumes(client, env_id)
    return render_items(page.items)


async def arcane_volume_inspect(
    client: ArcaneClient,
    *,
    volume_name: str,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Get details of a Docker volume."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await volumes.inspect_volume(client, env_id, volume_name)
    return render_json(result.data)


async def arcane_volume_remove(
    client: ArcaneClient,
    *,
    volume_name: str,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Remove a Docker volume from an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await volumes.remove_volume(client, env_id, volume_name)
    return result.message or f"Volume '{volume_name}' removed successfully"


async def arcane_volume_prune(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Remove unused Docker volumes from an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    report = (await volumes.prune_volumes(client, env_id)).data
    return (
        f"Pruned {report.volumes_deleted} volumes, "
        f"reclaimed {report.space_reclaimed} bytes"
    )
