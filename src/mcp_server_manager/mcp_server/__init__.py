"""MCP server for mcp-server-manager, exposing create/build/install via Model Context Protocol."""

from fastmcp import FastMCP


def create_mcp_server() -> FastMCP:
    """Create and configure the FastMCP server instance."""
    mcp = FastMCP(
        name="mcp-server-manager",
        instructions=(
            "MCP server for scaffolding, building and registering MCP servers written in "
            "TypeScript, Python or Java. Use create-server to scaffold a project, "
            "build-server to run its build tools, and install-server to register it in "
            "the desktop client configuration."
        ),
    )

    # Import and register tools and resources
    from mcp_server_manager.mcp_server.resources import register_resources
    from mcp_server_manager.mcp_server.tools import register_tools

    register_tools(mcp)
    register_resources(mcp)

    return mcp


def main() -> None:
    """Entry point for the mcp-server-manager-mcp command."""
    server = create_mcp_server()
    server.run()
