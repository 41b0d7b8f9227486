from __future__ import annotations

from typing import Optional

from arcane_mcp.api import images
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ImagePullOptions
from arcane_mcp.resolve import resolve_environment_id
from arcane_mcp.tools._common import render_items


async def arcane_image_list(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """List all Docker images in an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    page = await images.list_images(client, env_id)
    return render_items(page.items)


async def arcane_image_pull(
    client: ArcaneClient,
    *,
    image_name: str,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Pull a Docker image (e.g. nginx:latest) in an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await images.pull_image(client, env_id, ImagePullOptions(image_name=image_name))
    return result.message or f"Image '{image_name}' pulled successfully"


async def arcane_image_remove(
    client: ArcaneClient,
    *,
    image_id: str,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Remove a Docker image from an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    result = await images.remove_image(client, env_id, image_id)
    return result.message or f"Image '{image_id}' removed successfully"


async def arcane_image_prune(
    client: ArcaneClient,
    *,
    environment_id: Optional[str] = None,
    environment_name: Optional[str] = None,
) -> str:
    """Remove unused Docker images from an environment."""
    env_id = await resolve_environment_id(client, environment_id, environment_name)
    report = (await images.prune_images(client, env_id)).data
    return (
        f"Pruned {report.images_deleted} images, "
        f"reclaimed {report.space_reclaimed} bytes"
    )
