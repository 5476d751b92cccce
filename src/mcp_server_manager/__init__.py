"""Scaffold, build and register MCP servers written in TypeScript, Python or Java."""

__version__ = "1.0.0"
