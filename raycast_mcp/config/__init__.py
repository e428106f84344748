"""Configuration for the Raycast MCP server."""

from .settings import get_setting, get_all_settings, set_setting

__all__ = ['get_setting', 'get_all_settings', 'set_setting']
