"""Main MCP server implementation for Raycast extension tooling."""

import asyncio
import logging
import sys
from typing import Any, Dict, Optional

from mcp import Tool, types
from mcp.server import Server, NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, ErrorData, TextContent

from .config.settings import get_setting
from .registry.operation_registry import OperationRegistry, OperationRegistryError
from .registry.operations import create_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "raycast-server"
SERVER_VERSION = "0.1.0"


class RaycastMCPServer:
    """MCP Server exposing create, build and publish for Raycast extensions."""

    def __init__(self, registry: Optional[OperationRegistry] = None):
        """Initialize the MCP server with the extension operation registry."""
        self.registry = registry or create_registry()

        # Create MCP server instance
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)

        # Register handlers
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List all available tools."""
            return await self.list_tools()

        # Registered on the raw request table so McpError reaches the client as a
        # JSON-RPC error with its code. Arguments are checked only by the
        # registry's guards, so enum values reach the external tools as-is.
        async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
            """Route tool calls to the registry."""
            content = await self.call_tool(req.params.name, req.params.arguments)
            return types.ServerResult(types.CallToolResult(content=content, isError=False))

        self.server.request_handlers[types.CallToolRequest] = handle_call_tool

    async def list_tools(self) -> list[Tool]:
        return self.registry.get_tools()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> list[TextContent]:
        """Dispatch one tool call.

        Raises:
            McpError: With the JSON-RPC code of the failure kind
        """
        try:
            result = self.registry.dispatch_call(name, arguments)
        except OperationRegistryError as e:
            logger.warning(f"Tool {name} failed ({e.kind.name}): {e}")
            raise McpError(ErrorData(code=e.code, message=str(e))) from e
        except Exception as e:
            logger.exception(f"[MCP Error] Unexpected error executing tool {name}")
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=str(e))) from e

        return result.to_content()

    async def run(self):
        """Run the MCP server over stdio."""
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Raycast MCP server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=SERVER_NAME,
                    server_version=SERVER_VERSION,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    )
                )
            )


def main():
    """Main entry point for the MCP server."""
    # stdout carries JSON-RPC; diagnostics go to stderr
    logging.basicConfig(level=get_setting('log_level'), stream=sys.stderr)

    server = RaycastMCPServer()
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
