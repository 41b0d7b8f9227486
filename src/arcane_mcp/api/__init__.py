"""
Resource method groups for the Arcane REST API.

Each module maps domain verbs to (method, path, body) triples on an
ArcaneClient passed in explicitly; none of them keeps state.
"""

from . import (
    containers,
    environments,
    images,
    networks,
    stacks,
    system,
    templates,
    volumes,
)

__all__ = [
    "containers",
    "environments",
    "images",
    "networks",
    "stacks",
    "system",
    "templates",
    "volumes",
]
