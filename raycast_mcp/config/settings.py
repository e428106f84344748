"""
Runtime settings for the Raycast MCP server.

Settings are read once from environment variables at import time so the
server can be pointed at alternative toolchains without code changes.

Usage:
    from raycast_mcp.config.settings import get_setting

    runner.run([get_setting('npm_command'), 'init', '-y'], cwd=path)

Environment Variables:
    RAYCAST_MCP_NPM=<executable>    - Package manager CLI (default: npm)
    RAYCAST_MCP_RAY=<executable>    - Raycast CLI used for publishing (default: ray)
    RAYCAST_MCP_AUTHOR=<handle>     - Author written into new manifests (default: raycast)
    RAYCAST_MCP_LOG_LEVEL=<level>   - Logging level for stderr output (default: INFO)
"""

import os
from typing import Dict


SETTINGS: Dict[str, str] = {
    'npm_command': os.getenv('RAYCAST_MCP_NPM', 'npm'),
    'ray_command': os.getenv('RAYCAST_MCP_RAY', 'ray'),
    'author': os.getenv('RAYCAST_MCP_AUTHOR', 'raycast'),
    'log_level': os.getenv('RAYCAST_MCP_LOG_LEVEL', 'INFO').upper(),
}


def get_setting(name: str) -> str:
    """
    Look up a setting by name.

    Args:
        name: Setting name (e.g., 'npm_command')

    Returns:
        Current value of the setting

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('ray_command')
        'ray'
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    return SETTINGS[name]


def get_all_settings() -> Dict[str, str]:
    """Get a copy of all settings and their current values."""
    return SETTINGS.copy()


def set_setting(name: str, value: str) -> None:
    """
    Programmatically override a setting (for testing only).

    Warning:
        In production, use environment variables.
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    SETTINGS[name] = value
