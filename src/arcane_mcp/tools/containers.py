from __future__ import annotations

from typing import Awaitable, Callable, Optional

from arcane_mcp.api import containers
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ActionResponse
from arcane_mcp.resolve import resolve_container_id, resolve_environment_id
from arcane_mcp.tools._common import render_items, render_json

_Action = Callable[[ArcaneClient, str, str], Awaitable[ActionResponse]]


async def _run_action(
    client: ArcaneClient,
    action: _Action,
    verb: str,
    environment_id: Optional[str],
    environment_name: Optional[str],
    container_id: Optional[str],
    container_name: Optional[str],
) -> str:
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    cid = await resolve_container_id(client, env_id, container_id, container_name)
    display = container_name
    if not display:
        display = (await containers.get_container(client, env_id, cid)).data.name or cid
    await action(client, env_id, cid)
    return f"Container '{display}' {verb} successfully in environment '{env_id}'"


async def arcane_container_list(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """List all Docker containers in an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    page = await containers.list_containers(client, env_id)
    return render_items(page.items)


async def arcane_container_get(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    container_id: Optional[str] = None,
    container_name: Optional[str] = None,
) -> str:
    """Get details of a specific Docker container by ID or name."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    cid = await resolve_container_id(client, env_id, container_id, container_name)
    result = await containers.get_container(client, env_id, cid)
    return render_json(result.data)


async def arcane_container_start(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    container_id: Optional[str] = None,
    container_name: Optional[str] = None,
) -> str:
    """Start a Docker container."""
    return await _run_action(
        client,
        containers.start_container,
        "started",
        environment_id,
        environment_name,
        container_id,
        container_name,
    )


async def arcane_container_stop(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    container_id: Optional[str] = None,
    container_name: Optional[str] = None,
) -> str:
    """Stop a Docker container."""
    return await _run_action(
        client,
        containers.stop_container,
        "stopped",
        environment_id,
        environment_name,
        container_id,
        container_name,
    )


async def arcane_container_restart(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    container_id: Optional[str] = None,
    container_name: Optional[str] = None,
) -> str:
    """Restart a Docker container."""
    return await _run_action(
        client,
        containers.restart_container,
        "restarted",
        environment_id,
        environment_name,
        container_id,
        container_name,
    )


async def arcane_container_kill(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    container_id: Optional[str] = None,
    container_name: Optional[str] = None,
) -> str:
    """Force kill a Docker container."""
    return await _run_action(
        client,
        containers.kill_container,
        "killed",
        environment_id,
        environment_name,
        container_id,
        container_name,
    )
