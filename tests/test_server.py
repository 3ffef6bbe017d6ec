import pytest
from fastmcp import Client

from navmap.mcp.server import mcp


@pytest.mark.asyncio
async def test_health_tool() -> None:
    client = Client(mcp)
    async with client:
        res = await client.call_tool("health", {})
    texts = [getattr(item, "text", None) for item in getattr(res, "content", [])]
    assert "ok" in texts
