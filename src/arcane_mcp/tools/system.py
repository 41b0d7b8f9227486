from arcane_mcp.api import system
from arcane_mcp.client import ArcaneClient


async def arcane_version(client: ArcaneClient) -> str:
    """Get the Arcane server version information."""
    result = await system.get_version(client)
    return f"Arcane version: {result.data.version}"
