from __future__ import annotations

from typing import Optional

from arcane_mcp.api import stacks
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ListOptions, ProjectCreate, ProjectUpdate
from arcane_mcp.resolve import resolve_environment_id, resolve_stack_id
from arcane_mcp.tools._common import DEFAULT_LIMIT, Limit, render_items, render_json


async def _resolve(
    client: ArcaneClient,
    environment_id: Optional[str],
    environment_name: Optional[str],
    stack_id: Optional[str],
    stack_name: Optional[str],
) -> tuple[str, str]:
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    sid = await resolve_stack_id(client, env_id, stack_id, stack_name)
    return env_id, sid


async def _display_name(
    client: ArcaneClient, env_id: str, sid: str, stack_name: Optional[str]
) -> str:
    if stack_name:
        return stack_name
    return (await stacks.get_stack(client, env_id, sid)).data.name or sid


async def arcane_stack_list(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    search: Optional[str] = None,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    """List all Docker Compose stacks (projects) in an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    page = await stacks.list_stacks(
        client, env_id, ListOptions(search=search, limit=limit)
    )
    return render_items(page.items)


async def arcane_stack_get(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    """Get details of a specific Docker Compose stack by ID or name."""
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    result = await stacks.get_stack(client, env_id, sid)
    return render_json(result.data)


async def arcane_stack_deploy(
    client: ArcaneClient,
    *,
    name: str,
    compose_content: str,
    env_content: Optional[str] = None,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Deploy a new Docker Compose stack to an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    dto = ProjectCreate(
        name=name, compose_content=compose_content, env_content=env_content
    )
    await stacks.deploy_stack(client, env_id, dto)
    return f"Stack '{name}' deployed successfully in environment '{env_id}'"


async def arcane_stack_update(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
    name: Optional[str] = None,
    compose_content: Optional[str] = None,
    env_content: Optional[str] = None,
) -> str:
    """Update an existing Docker Compose stack (name, compose or .env content)."""
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    dto = ProjectUpdate(
        name=name, compose_content=compose_content, env_content=env_content
    )
    result = await stacks.update_stack(client, env_id, sid, dto)
    return f"Stack updated successfully:\n{render_json(result.data)}"


async def arcane_stack_delete(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    """Delete a Docker Compose stack from an environment."""
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    result = await stacks.delete_stack(client, env_id, sid)
    return result.message or "Stack deleted successfully"


async def arcane_stack_start(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    """
    Start a Docker Compose stack.
    Returns once the backend accepts the action, not when services are up.
    """
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    display = await _display_name(client, env_id, sid, stack_name)
    await stacks.start_stack(client, env_id, sid)
    return f"Stack '{display}' started successfully in environment '{env_id}'"


async def arcane_stack_stop(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    """Stop a Docker Compose stack."""
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    display = await _display_name(client, env_id, sid, stack_name)
    await stacks.stop_stack(client, env_id, sid)
    return f"Stack '{display}' stopped successfully in environment '{env_id}'"


async def arcane_stack_restart(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    """Restart a Docker Compose stack."""
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    display = await _display_name(client, env_id, sid, stack_name)
    await stacks.restart_stack(client, env_id, sid)
    return f"Stack '{display}' restarted successfully in environment '{env_id}'"


async def arcane_stack_pull(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    """Pull images for a Docker Compose stack."""
    env_id, sid = await _resolve(
        client, environment_id, environment_name, stack_id, stack_name
    )
    display = await _display_name(client, env_id, sid, stack_name)
    await stacks.pull_stack(client, env_id, sid)
    return (
        f"Images pulled successfully for stack '{display}' in environment '{env_id}'"
    )
