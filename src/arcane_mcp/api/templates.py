from __future__ import annotations

from typing import Optional

from arcane_mcp.api._query import with_query
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import (
    ActionResponse,
    ListOptions,
    Page,
    Single,
    Template,
    TemplateCreate,
    TemplateUpdate,
)

_TOOL = "templates"


async def list_templates(
    client: ArcaneClient, opts: Optional[ListOptions] = None
) -> Page[Template]:
    path = with_query("/templates", opts, include_limit=False)
    return await client.request_model(Page[Template], "GET", path, tool=_TOOL)


async def get_template(client: ArcaneClient, template_id: str) -> Single[Template]:
    return await client.request_model(
        Single[Template], "GET", f"/templates/{template_id}", tool=_TOOL
    )


async def create_template(client: ArcaneClient, dto: TemplateCreate) -> Single[Template]:
    return await client.request_model(
        Single[Template], "POST", "/templates", dto.to_wire(), tool=_TOOL
    )


async def update_template(
    client: ArcaneClient, template_id: str, dto: TemplateUpdate
) -> Single[Template]:
    return await client.request_model(
        Single[Template], "PUT", f"/templates/{template_id}", dto.to_wire(), tool=_TOOL
    )


async def delete_template(client: ArcaneClient, template_id: str) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "DELETE", f"/templates/{template_id}", tool=_TOOL
    )
