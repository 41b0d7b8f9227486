from __future__ import annotations

from typing import Optional

from arcane_mcp.api._query import with_query
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import (
    ActionResponse,
    Environment,
    EnvironmentCreate,
    EnvironmentUpdate,
    ListOptions,
    Page,
    Single,
)

_TOOL = "environments"


async def list_environments(
    client: ArcaneClient, opts: Optional[ListOptions] = None
) -> Page[Environment]:
    return await client.request_model(
        Page[Environment], "GET", with_query("/environments", opts), tool=_TOOL
    )


async def get_environment(client: ArcaneClient, env_id: str) -> Single[Environment]:
    return await client.request_model(
        Single[Environment], "GET", f"/environments/{env_id}", tool=_TOOL
    )


async def create_environment(
    client: ArcaneClient, dto: EnvironmentCreate
) -> Single[Environment]:
    return await client.request_model(
        Single[Environment], "POST", "/environments", dto.to_wire(), tool=_TOOL
    )


async def update_environment(
    client: ArcaneClient, env_id: str, dto: EnvironmentUpdate
) -> Single[Environment]:
    return await client.request_model(
        Single[Environment],
        "PUT",
        f"/environments/{env_id}",
        dto.to_wire(),
        tool=_TOOL,
    )


async def delete_environment(client: ArcaneClient, env_id: str) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "DELETE", f"/environments/{env_id}", tool=_TOOL
    )
