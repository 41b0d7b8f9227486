from __future__ import annotations

import asyncio
import logging

from mcp.server.fastmcp import FastMCP

from arcane_mcp.client import ArcaneClient
from arcane_mcp.core.config import create_client_from_env, load_settings
from arcane_mcp.core.logging import setup_logging
from arcane_mcp.core.registry import register_discovered_tools

log = logging.getLogger("arcane_mcp.server")


def build_app(client: ArcaneClient) -> FastMCP:
    app = FastMCP("arcane-mcp")
    names = register_discovered_tools(app, client)
    log.info("Registered %d tools", len(names))
    return app


# --- Entry point ----------------------------------------------------------- #


async def main() -> None:
    setup_logging(load_settings().log_level)
    async with create_client_from_env() as client:
        app = build_app(client)
        await app.run_stdio_async()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
