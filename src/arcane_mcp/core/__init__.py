"""Core surface for arcane-mcp (transport-agnostic)."""

from .config import Settings, create_client_from_env, load_env_config, load_settings
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event
from .outcome import ToolOutcome, error_message, error_outcome, success_outcome
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)

__all__ = [
    # Config helpers
    "Settings",
    "create_client_from_env",
    "load_env_config",
    "load_settings",
    # Logging
    "LogfmtFormatter",
    "setup_logging",
    "log_event",
    # Tool outcome boundary
    "ToolOutcome",
    "error_message",
    "error_outcome",
    "success_outcome",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
