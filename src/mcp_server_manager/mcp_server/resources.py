"""MCP resource handlers: read-only data exposed to AI assistants."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastmcp import FastMCP


def register_resources(mcp: FastMCP) -> None:
    """Register all resource handlers on the given MCP server."""

    @mcp.resource(
        "registry://servers",
        name="Registered Servers",
        description="Servers currently registered in the desktop client configuration.",
        mime_type="application/json",
    )
    def registered_servers() -> str:
        from mcp_server_manager import config_store
        from mcp_server_manager.errors import ConfigCorrupt
        from mcp_server_manager.user_config import get_registry_path

        path = get_registry_path()
        try:
            registry = config_store.load(path)
        except ConfigCorrupt as e:
            return json.dumps({"config_path": str(path), "error": str(e)})
        return json.dumps({"config_path": str(path), "servers": registry.servers})

    @mcp.resource(
        "config://user",
        name="User Configuration",
        description="Current user-level default configuration values.",
        mime_type="application/json",
    )
    def user_config() -> str:
        from mcp_server_manager.user_config import get_config_path, load_user_config

        config = load_user_config()
        return json.dumps(
            {
                "config_path": str(get_config_path()),
                "values": config,
            }
        )

    @mcp.resource(
        "template://list",
        name="Available Templates",
        description="Jinja2 templates used to scaffold each language.",
        mime_type="application/json",
    )
    def template_list() -> str:
        from mcp_server_manager.template_engine import get_templates_dir

        templates_dir = get_templates_dir()
        templates = (
            sorted(p.relative_to(templates_dir).as_posix() for p in templates_dir.rglob("*.j2"))
            if templates_dir.exists()
            else []
        )
        return json.dumps(templates)
