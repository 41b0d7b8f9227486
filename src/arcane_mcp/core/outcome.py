"""
Uniform tool outcome and the single error-normalization point.

Tool functions return text or raise; the registry wrapper turns either
into a ``ToolOutcome`` and hands an MCP ``CallToolResult`` to FastMCP.
Transport and resolution errors render identically.
"""

from __future__ import annotations

from dataclasses import dataclass

from mcp.types import CallToolResult, TextContent

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class ToolOutcome:
    text: str
    is_error: bool = False

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


def success_outcome(text: str) -> ToolOutcome:
    return ToolOutcome(text=text)


def error_message(exc: BaseException) -> str:
    """Human message for any error kind; API errors stringify to their detail."""
    return str(exc) or type(exc).__name__


def error_outcome(exc: BaseException) -> ToolOutcome:
    return ToolOutcome(text=ERROR_PREFIX + error_message(exc), is_error=True)


__all__ = [
    "ERROR_PREFIX",
    "ToolOutcome",
    "success_outcome",
    "error_message",
    "error_outcome",
]
