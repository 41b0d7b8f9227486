from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable, Iterable, List, Set, get_type_hints

from mcp.types import CallToolResult

from arcane_mcp.client import ArcaneClient
from arcane_mcp.core.observability import log_event
from arcane_mcp.core.outcome import error_outcome, success_outcome

log = logging.getLogger("arcane_mcp.core.registry")


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(
    package_name: str = "arcane_mcp.tools",
) -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        if name.rsplit(".", 1)[-1].startswith("_"):
            continue
        try:
            module = importlib.import_module(name)
            modules.append(module)
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", name, exc)
            continue

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield functions that satisfy the tool convention."""
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: first parameter must be 'client'",
                module.__name__,
                func.__name__,
            )
            continue

        yield func


# --- Wrapping / registration ---------------------------------------------- #


def _wrap_tool(
    func: Callable, client_provider: Callable[[], ArcaneClient]
) -> Callable:
    """
    Return a wrapper that injects client, hides it from the signature and
    is the one place a tool's failure is caught and rendered.
    """
    original_sig = inspect.signature(func)
    type_hints = get_type_hints(func, include_extras=True)

    new_params = []
    for i, (name, param) in enumerate(original_sig.parameters.items()):
        if i == 0 and name == "client":
            continue  # drop injected client
        ann = type_hints.get(name, param.annotation)
        new_params.append(param.replace(annotation=ann))

    new_sig = inspect.Signature(parameters=new_params, return_annotation=CallToolResult)

    async def wrapped(*args, **kwargs) -> CallToolResult:
        client = client_provider()
        try:
            text = await func(client, *args, **kwargs)
        except Exception as exc:
            outcome = error_outcome(exc)
            log_event(
                "tool.failed",
                log,
                level=logging.WARNING,
                tool=func.__name__,
                is_error=True,
                error_type=type(exc).__name__,
            )
        else:
            outcome = success_outcome(text)
            log_event("tool.completed", log, level=logging.DEBUG, tool=func.__name__)
        return outcome.to_call_tool_result()

    wrapped.__name__ = func.__name__
    wrapped.__doc__ = func.__doc__
    wrapped.__module__ = func.__module__
    wrapped.__signature__ = new_sig  # type: ignore[attr-defined]
    return wrapped


def register_discovered_tools(
    app,
    client_provider: Callable[[], ArcaneClient] | ArcaneClient,
    modules: List[ModuleType] | None = None,
) -> List[str]:
    """Register discovered tools on an app that exposes a .tool decorator."""
    if isinstance(client_provider, ArcaneClient):
        _client = client_provider

        def client_provider():
            return _client

    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    modules = modules or discover_tool_modules()
    seen_names: Set[str] = set()
    registered: List[str] = []

    for module in modules:
        for func in iter_tool_functions(module):
            name = func.__name__
            if name in seen_names:
                raise ValueError(f"Duplicate tool name detected: {name}")

            wrapped = _wrap_tool(func, client_provider)
            app.tool(name=name)(wrapped)
            seen_names.add(name)
            registered.append(name)
            log.info("Registered tool: %s (%s)", name, module.__name__)

    return registered
