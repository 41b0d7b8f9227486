"""
Compose stacks ("projects" on the wire) within an environment.

Deletion goes through ``/destroy`` with a DELETE verb rather than the
canonical project path; the backend only tears the stack down there.
"""

from __future__ import annotations

from typing import Optional

from arcane_mcp.api._query import with_query
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import (
    ActionResponse,
    ListOptions,
    Page,
    Project,
    ProjectCreate,
    ProjectUpdate,
    Single,
)

_TOOL = "stacks"


def _projects(env_id: str) -> str:
    return f"/environments/{env_id}/projects"


async def list_stacks(
    client: ArcaneClient, env_id: str, opts: Optional[ListOptions] = None
) -> Page[Project]:
    # the projects route filters by search only
    path = with_query(_projects(env_id), opts, include_limit=False)
    return await client.request_model(Page[Project], "GET", path, tool=_TOOL)


async def get_stack(client: ArcaneClient, env_id: str, stack_id: str) -> Single[Project]:
    return await client.request_model(
        Single[Project], "GET", f"{_projects(env_id)}/{stack_id}", tool=_TOOL
    )


async def deploy_stack(
    client: ArcaneClient, env_id: str, dto: ProjectCreate
) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "POST", _projects(env_id), dto.to_wire(), tool=_TOOL
    )


async def update_stack(
    client: ArcaneClient, env_id: str, stack_id: str, dto: ProjectUpdate
) -> Single[Project]:
    return await client.request_model(
        Single[Project],
        "PUT",
        f"{_projects(env_id)}/{stack_id}",
        dto.to_wire(),
        tool=_TOOL,
    )


async def delete_stack(client: ArcaneClient, env_id: str, stack_id: str) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "DELETE", f"{_projects(env_id)}/{stack_id}/destroy", tool=_TOOL
    )


async def _stack_action(
    client: ArcaneClient, env_id: str, stack_id: str, action: str
) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "POST", f"{_projects(env_id)}/{stack_id}/{action}", tool=_TOOL
    )


async def start_stack(client: ArcaneClient, env_id: str, stack_id: str) -> ActionResponse:
    return await _stack_action(client, env_id, stack_id, "up")


async def stop_stack(client: ArcaneClient, env_id: str, stack_id: str) -> ActionResponse:
    return await _stack_action(client, env_id, stack_id, "down")


async def restart_stack(client: ArcaneClient, env_id: str, stack_id: str) -> ActionResponse:
    return await _stack_action(client, env_id, stack_id, "restart")


async def pull_stack(client: ArcaneClient, env_id: str, stack_id: str) -> ActionResponse:
    return await _stack_action(client, env_id, stack_id, "pull-project-images")
