"""Entry point for `python -m raycast_mcp`."""

from .server import main

main()
