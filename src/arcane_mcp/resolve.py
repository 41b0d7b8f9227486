"""
Name -> ID resolution for environments, stacks and containers.

Each resolver returns a literal ID untouched (no network call), otherwise
lists the resource once and keeps exact, case-sensitive name matches. The
backend ``search`` filter is only a pre-filter; it is not guaranteed to be
an exact match.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from arcane_mcp.api import containers, environments, stacks
from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import ContainerSummary, ListOptions

RESOLVE_LIMIT = 50


# --- Resolution errors ---


class ResolutionError(ValueError):
    def __init__(self, message: str, *, query: Optional[str] = None):
        super().__init__(message)
        self.query = query


class MissingIdentifierError(ResolutionError):
    pass


class NotFoundResolutionError(ResolutionError):
    def __init__(self, message: str, *, query: str, available: list[str]):
        super().__init__(message, query=query)
        self.available = available


class AmbiguousResolutionError(ResolutionError):
    def __init__(self, message: str, *, query: str, candidates: list[str]):
        super().__init__(message, query=query)
        self.candidates = candidates


def _in_env(env_id: Optional[str]) -> str:
    # Environment lookups are not scoped, so they carry no qualifier.
    return f" in environment '{env_id}'" if env_id is not None else ""


def _not_found(
    kind: str, name: str, env_id: Optional[str], available: Optional[List[str]]
):
    # None means the backend sent no listing at all, as opposed to an empty one.
    listed = "none" if available is None else ", ".join(available)
    return NotFoundResolutionError(
        f"No {kind} found with name '{name}'{_in_env(env_id)}. "
        f"Available {kind}s: {listed}",
        query=name,
        available=available or [],
    )


def _ambiguous(kind: str, name: str, env_id: Optional[str], ids: List[str]):
    return AmbiguousResolutionError(
        f"Multiple {kind}s found with name '{name}'{_in_env(env_id)}. "
        f"Please use the {kind} ID instead. Matching IDs: {', '.join(ids)}",
        query=name,
        candidates=ids,
    )


def _names(names: Iterable[Optional[str]]) -> List[str]:
    return [n for n in names if n is not None]


def _pick(
    kind: str,
    name: str,
    env_id: Optional[str],
    ids: List[str],
    available: Optional[List[str]],
) -> str:
    if not ids:
        raise _not_found(kind, name, env_id, available)
    if len(ids) > 1:
        raise _ambiguous(kind, name, env_id, ids)
    return ids[0]


# --- Resolvers ---


async def resolve_environment_id(
    client: ArcaneClient,
    env_id: Optional[str] = None,
    env_name: Optional[str] = None,
) -> str:
    if env_id:
        return env_id
    if not env_name:
        raise MissingIdentifierError(
            "Either environment_id or environment_name must be provided"
        )

    page = await environments.list_environments(
        client, ListOptions(search=env_name, limit=RESOLVE_LIMIT)
    )
    envs = page.items
    ids = [e.id for e in envs if e.name == env_name]
    available = _names(e.name for e in envs) if page.has_data else None
    return _pick("environment", env_name, None, ids, available)


async def resolve_stack_id(
    client: ArcaneClient,
    env_id: str,
    stack_id: Optional[str] = None,
    stack_name: Optional[str] = None,
) -> str:
    if stack_id:
        return stack_id
    if not stack_name:
        raise MissingIdentifierError("Either stack_id or stack_name must be provided")

    page = await stacks.list_stacks(
        client, env_id, ListOptions(search=stack_name, limit=RESOLVE_LIMIT)
    )
    projects = page.items
    ids = [p.id for p in projects if p.name == stack_name]
    available = _names(p.name for p in projects) if page.has_data else None
    return _pick("stack", stack_name, env_id, ids, available)


def normalize_container_name(name: str) -> str:
    """
    Strip the single leading ``/`` Docker puts in front of container names.

    The Docker engine reports names as ``/web``; callers address them as
    ``web``. If the backend stops prefixing names this becomes a no-op.
    """
    return name[1:] if name.startswith("/") else name


def container_name_matches(reported: str, requested: str) -> bool:
    """Exact match against either the bare or the slash-prefixed form."""
    return reported == requested or reported == "/" + requested


def _matches(container: ContainerSummary, requested: str) -> bool:
    return any(container_name_matches(n, requested) for n in container.names or [])


async def resolve_container_id(
    client: ArcaneClient,
    env_id: str,
    container_id: Optional[str] = None,
    container_name: Optional[str] = None,
) -> str:
    if container_id:
        return container_id
    if not container_name:
        raise MissingIdentifierError(
            "Either container_id or container_name must be provided"
        )

    page = await containers.list_containers(client, env_id)
    found = page.items
    ids = [c.id for c in found if _matches(c, container_name)]
    available = None
    if page.has_data:
        available = [normalize_container_name(n) for c in found for n in c.names or []]
    return _pick("container", container_name, env_id, ids, available)
