from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ItemT = TypeVar("ItemT")


class WireModel(BaseModel):
    """
    Base for Arcane DTOs.
    Unknown fields are kept so that re-rendering a payload for the agent
    does not silently drop data the backend added.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_display(self) -> Dict[str, Any]:
        """Backend payload as received: explicit nulls kept, unsent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class InputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Envelopes ---


class Pagination(WireModel):
    total_items: int = Field(default=0, alias="totalItems")
    total_pages: int = Field(default=0, alias="totalPages")
    current_page: int = Field(default=0, alias="currentPage")
    items_per_page: int = Field(default=0, alias="itemsPerPage")
    grand_total_items: Optional[int] = Field(default=None, alias="grandTotalItems")


class Page(WireModel, Generic[ItemT]):
    """
    Paginated list result.

    ``data`` is null/absent when the call failed or returned no body; use
    ``items`` to read the listing, which treats that case as empty.
    """

    success: bool = False
    data: Optional[List[ItemT]] = None
    pagination: Optional[Pagination] = None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @property
    def items(self) -> List[ItemT]:
        return list(self.data) if self.data is not None else []


class Single(WireModel, Generic[ItemT]):
    success: bool = False
    data: ItemT


class ActionResponse(WireModel):
    success: bool = False
    message: str = ""


@dataclass(frozen=True)
class ListOptions:
    search: Optional[str] = None
    limit: Optional[int] = None


# --- Environments ---


class Environment(WireModel):
    id: str
    name: Optional[str] = None
    api_url: Optional[str] = Field(default=None, alias="apiUrl")
    status: Optional[str] = None
    enabled: Optional[bool] = None
    is_edge: Optional[bool] = Field(default=None, alias="isEdge")
    api_key: Optional[str] = Field(default=None, alias="apiKey")


class EnvironmentCreate(InputModel):
    api_url: str = Field(alias="apiUrl")
    name: Optional[str] = None
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    bootstrap_token: Optional[str] = Field(default=None, alias="bootstrapToken")
    enabled: Optional[bool] = None
    is_edge: Optional[bool] = Field(default=None, alias="isEdge")
    use_api_key: Optional[bool] = Field(default=None, alias="useApiKey")


class EnvironmentUpdate(InputModel):
    name: Optional[str] = None
    api_url: Optional[str] = Field(default=None, alias="apiUrl")
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    bootstrap_token: Optional[str] = Field(default=None, alias="bootstrapToken")
    enabled: Optional[bool] = None
    regenerate_api_key: Optional[bool] = Field(default=None, alias="regenerateApiKey")


# --- Stacks (compose projects) ---


class Project(WireModel):
    id: str
    name: Optional[str] = None
    path: Optional[str] = None
    status: Optional[str] = None
    service_count: Optional[int] = Field(default=None, alias="serviceCount")
    running_count: Optional[int] = Field(default=None, alias="runningCount")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    compose_content: Optional[str] = Field(default=None, alias="composeContent")
    env_content: Optional[str] = Field(default=None, alias="envContent")


class ProjectCreate(InputModel):
    name: str
    compose_content: str = Field(alias="composeContent")
    env_content: Optional[str] = Field(default=None, alias="envContent")


class ProjectUpdate(InputModel):
    name: Optional[str] = None
    compose_content: Optional[str] = Field(default=None, alias="composeContent")
    env_content: Optional[str] = Field(default=None, alias="envContent")


# --- Containers ---


class ContainerSummary(WireModel):
    id: str
    names: Optional[List[str]] = None
    image: Optional[str] = None
    image_id: Optional[str] = Field(default=None, alias="imageId")
    state: Any = None
    status: Any = None
    labels: Optional[Dict[str, Any]] = None


class ContainerDetails(WireModel):
    id: str
    name: Optional[str] = None
    image: Optional[str] = None
    image_id: Optional[str] = Field(default=None, alias="imageId")
    created: Optional[str] = None
    state: Any = None
    labels: Optional[Dict[str, Any]] = None


# --- Images ---


class ImageSummary(WireModel):
    id: str
    repo_tags: Optional[List[str]] = Field(default=None, alias="repoTags")
    size: Optional[int] = None
    in_use: Optional[bool] = Field(default=None, alias="inUse")
    repo: Optional[str] = None
    tag: Optional[str] = None


class ImagePullOptions(InputModel):
    image_name: str = Field(alias="imageName")


class ImagePruneReport(WireModel):
    images_deleted: Optional[int] = Field(default=0, alias="imagesDeleted")
    space_reclaimed: Optional[int] = Field(default=0, alias="spaceReclaimed")


# --- Volumes ---


class Volume(WireModel):
    name: str
    driver: Optional[str] = None
    mountpoint: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    size: Optional[int] = None


class VolumePruneReport(WireModel):
    volumes_deleted: Optional[int] = Field(default=0, alias="volumesDeleted")
    space_reclaimed: Optional[int] = Field(default=0, alias="spaceReclaimed")


# --- Networks ---


class NetworkSummary(WireModel):
    id: str
    name: Optional[str] = None
    driver: Optional[str] = None
    scope: Optional[str] = None
    internal: Optional[bool] = None
    attachable: Optional[bool] = None
    ingress: Optional[bool] = None


class NetworkInspect(NetworkSummary):
    containers: Any = None
    options: Any = None
    labels: Optional[Dict[str, Any]] = None


class NetworkPruneReport(WireModel):
    networks_deleted: Optional[int] = Field(default=0, alias="networksDeleted")


# --- Templates ---


class Template(WireModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    compose_content: Optional[str] = Field(default=None, alias="composeContent")
    env_content: Optional[str] = Field(default=None, alias="envContent")
    category: Optional[str] = None
    tags: Optional[List[str]] = None


class TemplateCreate(InputModel):
    name: str
    compose_content: str = Field(alias="composeContent")
    env_content: Optional[str] = Field(default=None, alias="envContent")
    description: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None


class TemplateUpdate(InputModel):
    name: Optional[str] = None
    compose_content: Optional[str] = Field(default=None, alias="composeContent")
    env_content: Optional[str] = Field(default=None, alias="envContent")
    description: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None


# --- System ---


class VersionInfo(WireModel):
    version: Optional[str] = None
