from __future__ import annotations

from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ActionResponse, ContainerDetails, ContainerSummary, Page, Single

_TOOL = "containers"


def _containers(env_id: str) -> str:
    return f"/environments/{env_id}/containers"


async def list_containers(client: ArcaneClient, env_id: str) -> Page[ContainerSummary]:
    # No server-side name filter on this route.
    return await client.request_model(
        Page[ContainerSummary], "GET", _containers(env_id), tool=_TOOL
    )


async def get_container(
    client: ArcaneClient, env_id: str, container_id: str
) -> Single[ContainerDetails]:
    return await client.request_model(
        Single[ContainerDetails],
        "GET",
        f"{_containers(env_id)}/{container_id}",
        tool=_TOOL,
    )


async def _container_action(
    client: ArcaneClient, env_id: str, container_id: str, action: str
) -> ActionResponse:
    return await client.request_model(
        ActionResponse,
        "POST",
        f"{_containers(env_id)}/{container_id}/{action}",
        tool=_TOOL,
    )


async def start_container(
    client: ArcaneClient, env_id: str, container_id: str
) -> ActionResponse:
    return await _container_action(client, env_id, container_id, "start")


async def stop_container(
    client: ArcaneClient, env_id: str, container_id: str
) -> ActionResponse:
    return await _container_action(client, env_id, container_id, "stop")


async def restart_container(
    client: ArcaneClient, env_id: str, container_id: str
) -> ActionResponse:
    return await _container_action(client, env_id, container_id, "restart")


async def kill_container(
    client: ArcaneClient, env_id: str, container_id: str
) -> ActionResponse:
    """Kill goes through the generic update route, not a dedicated path."""
    return await client.request_model(
        ActionResponse,
        "POST",
        f"{_containers(env_id)}/{container_id}/update",
        {"action": "kill"},
        tool=_TOOL,
    )
