from __future__ import annotations

from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import (
    ActionResponse,
    NetworkInspect,
    NetworkPruneReport,
    NetworkSummary,
    Page,
    Single,
)

_TOOL = "networks"


def _networks(env_id: str) -> str:
    return f"/environments/{env_id}/networks"


async def list_networks(client: ArcaneClient, env_id: str) -> Page[NetworkSummary]:
    return await client.request_model(
        Page[NetworkSummary], "GET", _networks(env_id), tool=_TOOL
    )


async def inspect_network(
    client: ArcaneClient, env_id: str, network_id: str
) -> Single[NetworkInspect]:
    return await client.request_model(
        Single[NetworkInspect], "GET", f"{_networks(env_id)}/{network_id}", tool=_TOOL
    )


async def remove_network(
    client: ArcaneClient, env_id: str, network_id: str
) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "DELETE", f"{_networks(env_id)}/{network_id}", tool=_TOOL
    )


async def prune_networks(client: ArcaneClient, env_id: str) -> Single[NetworkPruneReport]:
    return await client.request_model(
        Single[NetworkPruneReport], "POST", f"{_networks(env_id)}/prune", tool=_TOOL
    )
