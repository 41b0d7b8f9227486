from __future__ import annotations

from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ActionResponse, Page, Single, Volume, VolumePruneReport

_TOOL = "volumes"


def _volumes(env_id: str) -> str:
    return f"/environments/{env_id}/volumes"


async def list_volumes(client: ArcaneClient, env_id: str) -> Page[Volume]:
    return await client.request_model(Page[Volume], "GET", _volumes(env_id), tool=_TOOL)


async def inspect_volume(client: ArcaneClient, env_id: str, name: str) -> Single[Volume]:
    return await client.request_model(
        Single[Volume], "GET", f"{_volumes(env_id)}/{name}", tool=_TOOL
    )


async def remove_volume(client: ArcaneClient, env_id: str, name: str) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "DELETE", f"{_volumes(env_id)}/{name}", tool=_TOOL
    )


async def prune_volumes(client: ArcaneClient, env_id: str) -> Single[VolumePruneReport]:
    return await client.request_model(
        Single[VolumePruneReport], "POST", f"{_volumes(env_id)}/prune", tool=_TOOL
    )
