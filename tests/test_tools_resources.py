import json

import pytest
import respx
from httpx import Response

from arcane_mcp.client import ArcaneAPIError, ArcaneClient
from arcane_mcp.tools.images import arcane_image_prune, arcane_image_pull, arcane_image_remove
from arcane_mcp.tools.networks import arcane_network_inspect, arcane_network_prune
from arcane_mcp.tools.system import arcane_version
from arcane_mcp.tools.templates import (
    arcane_template_create,
    arcane_template_delete,
    arcane_template_list,
)
from arcane_mcp.tools.volumes import arcane_volume_prune, arcane_volume_remove

BASE = "https://mock-arcane.com/api"
ENV = f"{BASE}/environments/e1"


@pytest.fixture
def client():
    return ArcaneClient(host="https://mock-arcane.com", api_key="mock-key")


@pytest.mark.asyncio
@respx.mock
async def test_image_pull_sends_image_name(client):
    route = respx.post(f"{ENV}/images/pull").mock(
        return_value=Response(200, json={"success": True})
    )

    async with client:
        text = await arcane_image_pull(client, environment_id="e1", image_name="nginx:latest")

    assert text == "Image 'nginx:latest' pulled successfully"
    assert json.loads(route.calls.last.request.content) == {"imageName": "nginx:latest"}


@pytest.mark.asyncio
@respx.mock
async def test_image_remove_default_message(client):
    respx.delete(f"{ENV}/images/img123").mock(
        return_value=Response(200, json={"success": True})
    )

    async with client:
        text = await arcane_image_remove(client, environment_id="e1", image_id="img123")

    assert text == "Image 'img123' removed successfully"


@pytest.mark.asyncio
@respx.mock
async def test_image_prune_report(client):
    respx.post(f"{ENV}/images/prune").mock(
        return_value=Response(
            200,
            json={"success": True, "data": {"imagesDeleted": 3, "spaceReclaimed": 1024}},
        )
    )

    async with client:
        text = await arcane_image_prune(client, environment_id="e1")

    assert text == "Pruned 3 images, reclaimed 1024 bytes"


@pytest.mark.asyncio
@respx.mock
async def test_volume_prune_and_remove(client):
    respx.post(f"{ENV}/volumes/prune").mock(
        return_value=Response(
            200,
            json={"success": True, "data": {"volumesDeleted": 2, "spaceReclaimed": 0}},
        )
    )
    respx.delete(f"{ENV}/volumes/data").mock(
        return_value=Response(200, json={"success": True, "message": "Volume gone"})
    )

    async with client:
        pruned = await arcane_volume_prune(client, environment_id="e1")
        removed = await arcane_volume_remove(client, environment_id="e1", volume_name="data")

    assert pruned == "Pruned 2 volumes, reclaimed 0 bytes"
    assert removed == "Volume gone"


@pytest.mark.asyncio
@respx.mock
async def test_network_prune_and_inspect(client):
    respx.post(f"{ENV}/networks/prune").mock(
        return_value=Response(200, json={"success": True, "data": {"networksDeleted": 4}})
    )
    respx.get(f"{ENV}/networks/n1").mock(
        return_value=Response(
            200, json={"success": True, "data": {"id": "n1", "name": "bridge"}}
        )
    )

    async with client:
        pruned = await arcane_network_prune(client, environment_id="e1")
        inspected = await arcane_network_inspect(client, environment_id="e1", network_id="n1")

    assert pruned == "Pruned 4 networks"
    assert json.loads(inspected) == {"id": "n1", "name": "bridge"}


@pytest.mark.asyncio
@respx.mock
async def test_template_list_forwards_search_only(client):
    route = respx.get(f"{BASE}/templates").mock(
        return_value=Response(200, json={"success": True, "data": []})
    )

    async with client:
        text = await arcane_template_list(client, search="redis", limit=10)

    assert str(route.calls.last.request.url) == f"{BASE}/templates?search=redis"
    assert json.loads(text) == []


@pytest.mark.asyncio
@respx.mock
async def test_template_create_and_delete(client):
    created = {"id": "t1", "name": "redis", "composeContent": "services: {}"}
    route = respx.post(f"{BASE}/templates").mock(
        return_value=Response(200, json={"success": True, "data": created})
    )
    respx.delete(f"{BASE}/templates/t1").mock(
        return_value=Response(200, json={"success": True})
    )

    async with client:
        text = await arcane_template_create(
            client, name="redis", compose_content="services: {}", tags=["cache"]
        )
        deleted = await arcane_template_delete(client, template_id="t1")

    assert text == "Template created successfully:\n" + json.dumps(created, indent=2)
    assert json.loads(route.calls.last.request.content) == {
        "name": "redis",
        "composeContent": "services: {}",
        "tags": ["cache"],
    }
    assert deleted == "Template deleted successfully"


@pytest.mark.asyncio
@respx.mock
async def test_version(client):
    respx.get(f"{BASE}/version").mock(
        return_value=Response(200, json={"success": True, "data": {"version": "1.2.3"}})
    )

    async with client:
        text = await arcane_version(client)

    assert text == "Arcane version: 1.2.3"


@pytest.mark.asyncio
@respx.mock
async def test_api_errors_propagate_from_tools(client):
    respx.post(f"{ENV}/images/prune").mock(
        return_value=Response(500, json={"detail": "daemon unavailable"})
    )

    async with client:
        with pytest.raises(ArcaneAPIError) as exc:
            await arcane_image_prune(client, environment_id="e1")

    assert exc.value.status == 500
    assert str(exc.value) == "daemon unavailable"
