from __future__ import annotations

from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import (
    ActionResponse,
    ImagePruneReport,
    ImagePullOptions,
    ImageSummary,
    Page,
    Single,
)

_TOOL = "images"


def _images(env_id: str) -> str:
    return f"/environments/{env_id}/images"


async def list_images(client: ArcaneClient, env_id: str) -> Page[ImageSummary]:
    return await client.request_model(Page[ImageSummary], "GET", _images(env_id), tool=_TOOL)


async def pull_image(
    client: ArcaneClient, env_id: str, dto: ImagePullOptions
) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "POST", f"{_images(env_id)}/pull", dto.to_wire(), tool=_TOOL
    )


async def remove_image(client: ArcaneClient, env_id: str, image_id: str) -> ActionResponse:
    return await client.request_model(
        ActionResponse, "DELETE", f"{_images(env_id)}/{image_id}", tool=_TOOL
    )


async def prune_images(client: ArcaneClient, env_id: str) -> Single[ImagePruneReport]:
    return await client.request_model(
        Single[ImagePruneReport], "POST", f"{_images(env_id)}/prune", tool=_TOOL
    )
