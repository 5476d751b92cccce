"""Shared fixtures for MCP server tests."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from fastmcp import Client

from mcp_server_manager.mcp_server import create_mcp_server


@pytest_asyncio.fixture
async def mcp_client() -> AsyncGenerator[Client]:
    """Provide a connected in-memory FastMCP client."""
    server = create_mcp_server()
    async with Client(server) as client:
        yield client
