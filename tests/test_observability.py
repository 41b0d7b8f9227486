import logging

import pytest
import respx
from httpx import Response

from arcane_mcp.client import ArcaneClient
from arcane_mcp.core.logging import LogfmtFormatter
from arcane_mcp.core.observability import log_event


def test_log_event_drops_reserved_keys(caplog):
    with caplog.at_level(logging.INFO, logger="arcane_mcp.observability"):
        log_event("tool.completed", tool="arcane_version", module="oops", status=200)

    record = next(r for r in caplog.records if r.getMessage() == "tool.completed")
    assert record.tool == "arcane_version"
    assert record.status == 200
    assert record.module != "oops"


@pytest.mark.asyncio
@respx.mock
async def test_request_log_has_no_api_key(caplog):
    respx.get("https://mock-arcane.com/api/version").mock(
        return_value=Response(200, json={"success": True, "data": {"version": "1"}})
    )
    client = ArcaneClient(host="https://mock-arcane.com", api_key="super-secret")

    with caplog.at_level(logging.DEBUG, logger="arcane_mcp.client"):
        async with client:
            await client.get("/version", tool="system")

    record = next(r for r in caplog.records if r.getMessage() == "arcane.request")
    assert record.method == "GET"
    assert record.path == "/version"
    assert record.status == 200
    assert record.tool == "system"

    line = LogfmtFormatter().format(record)
    assert "super-secret" not in line
    assert "path=/version" in line
