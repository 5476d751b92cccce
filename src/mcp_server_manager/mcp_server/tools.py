"""MCP tool handlers: the create, build and install operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import Field

from mcp_server_manager.models import Language

if TYPE_CHECKING:
    from fastmcp import FastMCP

LANGUAGE_CHOICES = ", ".join(lang.value for lang in Language)


def register_tools(mcp: FastMCP) -> None:
    """Register all tool handlers on the given MCP server."""

    # ------------------------------------------------------------------
    # create-server
    # ------------------------------------------------------------------
    @mcp.tool(
        name="create-server",
        description="Create a new MCP server project with proper scaffolding",
        tags={"project", "create"},
    )
    def create_server(
        name: Annotated[str, Field(description="Name of the MCP server to create")],
        language: Annotated[
            str, Field(description=f"Programming language to use ({LANGUAGE_CHOICES})")
        ],
        directory: Annotated[
            str, Field(description="Directory where the server should be created")
        ],
    ) -> str:
        from mcp_server_manager.operations import create_server as _create

        return _create(name, language, directory).model_dump_json(exclude_none=True)

    # ------------------------------------------------------------------
    # build-server
    # ------------------------------------------------------------------
    @mcp.tool(
        name="build-server",
        description="Build an existing MCP server from source code",
        tags={"project", "build"},
    )
    def build_server(
        directory: Annotated[
            str, Field(description="Directory of the MCP server to build")
        ],
    ) -> str:
        from mcp_server_manager.operations import build_server as _build

        return _build(directory).model_dump_json(exclude_none=True)

    # ------------------------------------------------------------------
    # install-server
    # ------------------------------------------------------------------
    @mcp.tool(
        name="install-server",
        description="Install an MCP server for use with clients like Claude Desktop",
        tags={"project", "install"},
    )
    def install_server(
        directory: Annotated[
            str, Field(description="Directory of the built MCP server")
        ],
        configPath: Annotated[  # noqa: N803
            str | None, Field(description="Path to Claude Desktop config (optional)")
        ] = None,
        name: Annotated[
            str | None,
            Field(description="Name to register the server under (defaults to directory name)"),
        ] = None,
    ) -> str:
        from mcp_server_manager.operations import install_server as _install

        return _install(directory, config_path=configPath, name=name).model_dump_json(
            exclude_none=True
        )
