"""MCP tool handlers."""

from .extension_tools import ExtensionTools

__all__ = ['ExtensionTools']
