from arcane_mcp.client import ArcaneClient
from arcane_mcp.models import Single, VersionInfo


async def get_version(client: ArcaneClient) -> Single[VersionInfo]:
    return await client.request_model(Single[VersionInfo], "GET", "/version", tool="system")
