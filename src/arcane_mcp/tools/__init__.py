"""
MCP tool adapters for Arcane.

Every public coroutine whose first parameter is ``client`` is registered as
a tool by ``arcane_mcp.core.registry``; modules prefixed with ``_`` hold
shared helpers and are not scanned.
"""

from .containers import (
    arcane_container_get,
    arcane_container_kill,
    arcane_container_list,
    arcane_container_restart,
    arcane_container_start,
    arcane_container_stop,
)
from .environments import (
    arcane_environment_create,
    arcane_environment_delete,
    arcane_environment_get,
    arcane_environment_list,
    arcane_environment_update,
)
from .images import (
    arcane_image_list,
    arcane_image_prune,
    arcane_image_pull,
    arcane_image_remove,
)
from .networks import (
    arcane_network_inspect,
    arcane_network_list,
    arcane_network_prune,
    arcane_network_remove,
)
from .stacks import (
    arcane_stack_delete,
    arcane_stack_deploy,
    arcane_stack_get,
    arcane_stack_list,
    arcane_stack_pull,
    arcane_stack_restart,
    arcane_stack_start,
    arcane_stack_stop,
    arcane_stack_update,
)
from .system import arcane_version
from .templates import (
    arcane_template_create,
    arcane_template_delete,
    arcane_template_get,
    arcane_template_list,
    arcane_template_update,
)
from .volumes import (
    arcane_volume_inspect,
    arcane_volume_list,
    arcane_volume_prune,
    arcane_volume_remove,
)

__all__ = [
    "arcane_environment_list",
    "arcane_environment_get",
    "arcane_environment_create",
    "arcane_environment_update",
    "arcane_environment_delete",
    "arcane_stack_list",
    "arcane_stack_get",
    "arcane_stack_deploy",
    "arcane_stack_update",
    "arcane_stack_delete",
    "arcane_stack_start",
    "arcane_stack_stop",
    "arcane_stack_restart",
    "arcane_stack_pull",
    "arcane_container_list",
    "arcane_container_get",
    "arcane_container_start",
    "arcane_container_stop",
    "arcane_container_restart",
    "arcane_container_kill",
    "arcane_image_list",
    "arcane_image_pull",
    "arcane_image_remove",
    "arcane_image_prune",
    "arcane_volume_list",
    "arcane_volume_inspect",
    "arcane_volume_remove",
    "arcane_volume_prune",
    "arcane_network_list",
    "arcane_network_inspect",
    "arcane_network_remove",
    "arcane_network_prune",
    "arcane_template_list",
    "arcane_template_get",
    "arcane_template_create",
    "arcane_template_update",
    "arcane_template_delete",
    "arcane_version",
]
