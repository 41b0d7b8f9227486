import json

import pytest
import respx
from httpx import Response

from arcane_mcp.api import images, networks, system, templates, volumes
from arcane_mcp.client import ArcaneAPIError, ArcaneClient
from arcane_mcp.models import ImagePullOptions, ListOptions, TemplateCreate, TemplateUpdate

BASE = "https://mock-arcane.com/api"
ENV = f"{BASE}/environments/e1"
OK = {"success": True, "message": "ok"}


@pytest.fixture
def client():
    return ArcaneClient(host="https://mock-arcane.com", api_key="mock-key")


# --- Images ---


@pytest.mark.asyncio
@respx.mock
async def test_pull_image_sends_image_name(client):
    route = respx.post(f"{ENV}/images/pull").mock(return_value=Response(200, json=OK))

    async with client:
        await images.pull_image(client, "e1", ImagePullOptions(image_name="nginx:latest"))

    assert json.loads(route.calls.last.request.content) == {"imageName": "nginx:latest"}


@pytest.mark.asyncio
@respx.mock
async def test_remove_and_prune_images(client):
    remove = respx.delete(f"{ENV}/images/sha256:abc").mock(
        return_value=Response(200, json=OK)
    )
    respx.post(f"{ENV}/images/prune").mock(
        return_value=Response(
            200,
            json={"success": True, "data": {"imagesDeleted": 3, "spaceReclaimed": 1024}},
        )
    )

    async with client:
        await images.remove_image(client, "e1", "sha256:abc")
        report = await images.prune_images(client, "e1")

    assert remove.called
    assert report.data.images_deleted == 3
    assert report.data.space_reclaimed == 1024


@pytest.mark.asyncio
@respx.mock
async def test_list_images_missing_data_is_empty(client):
    respx.get(f"{ENV}/images").mock(return_value=Response(200, json={"success": True}))

    async with client:
        page = await images.list_images(client, "e1")

    assert page.items == []


# --- Volumes ---


@pytest.mark.asyncio
@respx.mock
async def test_volume_routes(client):
    respx.get(f"{ENV}/volumes").mock(
        return_value=Response(200, json={"success": True, "data": [{"name": "data"}]})
    )
    respx.get(f"{ENV}/volumes/data").mock(
        return_value=Response(
            200, json={"success": True, "data": {"name": "data", "driver": "local"}}
        )
    )
    remove = respx.delete(f"{ENV}/volumes/data").mock(return_value=Response(200, json=OK))
    respx.post(f"{ENV}/volumes/prune").mock(
        return_value=Response(
            200,
            json={"success": True, "data": {"volumesDeleted": 2, "spaceReclaimed": 10}},
        )
    )

    async with client:
        listed = await volumes.list_volumes(client, "e1")
        inspected = await volumes.inspect_volume(client, "e1", "data")
        await volumes.remove_volume(client, "e1", "data")
        pruned = await volumes.prune_volumes(client, "e1")

    assert [v.name for v in listed.items] == ["data"]
    assert inspected.data.driver == "local"
    assert remove.called
    assert pruned.data.volumes_deleted == 2


# --- Networks ---


@pytest.mark.asyncio
@respx.mock
async def test_network_routes(client):
    respx.get(f"{ENV}/networks/n1").mock(
        return_value=Response(
            200,
            json={"success": True, "data": {"id": "n1", "name": "bridge", "containers": {}}},
        )
    )
    remove = respx.delete(f"{ENV}/networks/n1").mock(return_value=Response(200, json=OK))
    respx.post(f"{ENV}/networks/prune").mock(
        return_value=Response(200, json={"success": True, "data": {"networksDeleted": 4}})
    )

    async with client:
        inspected = await networks.inspect_network(client, "e1", "n1")
        await networks.remove_network(client, "e1", "n1")
        pruned = await networks.prune_networks(client, "e1")

    assert inspected.data.name == "bridge"
    assert remove.called
    assert pruned.data.networks_deleted == 4


# --- Templates ---


@pytest.mark.asyncio
@respx.mock
async def test_template_list_forwards_search_only(client):
    route = respx.get(f"{BASE}/templates").mock(
        return_value=Response(200, json={"success": True, "data": []})
    )

    async with client:
        await templates.list_templates(client, ListOptions(search="redis", limit=50))

    assert str(route.calls.last.request.url) == f"{BASE}/templates?search=redis"


@pytest.mark.asyncio
@respx.mock
async def test_template_crud(client):
    tpl = {"id": "t1", "name": "redis", "tags": ["db"]}
    create = respx.post(f"{BASE}/templates").mock(
        return_value=Response(200, json={"success": True, "data": tpl})
    )
    update = respx.put(f"{BASE}/templates/t1").mock(
        return_value=Response(200, json={"success": True, "data": tpl})
    )
    delete = respx.delete(f"{BASE}/templates/t1").mock(return_value=Response(200, json=OK))

    async with client:
        created = await templates.create_template(
            client, TemplateCreate(name="redis", compose_content="services: {}", tags=["db"])
        )
        await templates.update_template(client, "t1", TemplateUpdate(description="cache"))
        await templates.delete_template(client, "t1")

    assert created.data.tags == ["db"]
    assert json.loads(create.calls.last.request.content) == {
        "name": "redis",
        "composeContent": "services: {}",
        "tags": ["db"],
    }
    assert json.loads(update.calls.last.request.content) == {"description": "cache"}
    assert delete.called


# --- System ---


@pytest.mark.asyncio
@respx.mock
async def test_get_version(client):
    respx.get(f"{BASE}/version").mock(
        return_value=Response(200, json={"success": True, "data": {"version": "1.4.0"}})
    )

    async with client:
        result = await system.get_version(client)

    assert result.data.version == "1.4.0"


@pytest.mark.asyncio
@respx.mock
async def test_api_errors_propagate_from_groups(client):
    respx.get(f"{BASE}/templates/nope").mock(
        return_value=Response(404, json={"detail": "Template not found"})
    )

    async with client:
        with pytest.raises(ArcaneAPIError) as exc:
            await templates.get_template(client, "nope")

    assert exc.value.status == 404
    assert str(exc.value) == "Template not found"
