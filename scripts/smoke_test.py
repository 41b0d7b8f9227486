"""
Read-only smoke test against a live Arcane instance.

Requires ARCANE_HOST and ARCANE_API_KEY; optional TEST_ENVIRONMENT_NAME
exercises name resolution and the per-environment listings.
"""

from __future__ import annotations

import asyncio
import os
import sys
from typing import Optional

from arcane_mcp.api import containers, environments, stacks, system
from arcane_mcp.client import ArcaneAPIError, ArcaneClient
from arcane_mcp.resolve import ResolutionError, resolve_environment_id


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val else default


def _print_step(title: str) -> None:
    print(f"\n== {title}")


def _fail(msg: str) -> int:
    print(f"FAILED: {msg}")
    return 1


async def run_smoke_test() -> int:
    # --- Config ---
    host = os.getenv("ARCANE_HOST")
    api_key = os.getenv("ARCANE_API_KEY")
    if not host or not api_key:
        return _fail("Missing ARCANE_HOST or ARCANE_API_KEY.")

    env_name = _env("TEST_ENVIRONMENT_NAME")

    print("Config:")
    print(f"  host: {host}")
    print(f"  environment_name: {env_name}")

    async with ArcaneClient(host=host, api_key=api_key) as client:
        try:
            _print_step("Version")
            version = await system.get_version(client)
            print(f"  version: {version.data.version}")

            _print_step("List environments")
            page = await environments.list_environments(client)
            for env in page.items:
                print(f"  - {env.id} {env.name} ({env.status})")

            if not env_name:
                print("\nTEST_ENVIRONMENT_NAME not set; skipping scoped checks.")
                return 0

            _print_step(f"Resolve environment '{env_name}'")
            env_id = await resolve_environment_id(client, None, env_name)
            print(f"  id: {env_id}")

            _print_step("List stacks")
            for project in (await stacks.list_stacks(client, env_id)).items:
                print(f"  - {project.id} {project.name} ({project.status})")

            _print_step("List containers")
            for container in (await containers.list_containers(client, env_id)).items:
                print(f"  - {container.id[:12]} {', '.join(container.names or [])}")
        except (ArcaneAPIError, ResolutionError) as exc:
            return _fail(str(exc))

    print("\nOK")
    return 0


def main() -> None:
    sys.exit(asyncio.run(run_smoke_test()))


if __name__ == "__main__":
    main()
