"""MCP server for creating, building and publishing Raycast extensions."""

__version__ = "0.1.0"
