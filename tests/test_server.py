"""Tests for the MCP transport adapter."""

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolRequestParams,
    CallToolResult,
)

from raycast_mcp.registry.operations import create_registry
from raycast_mcp.server import RaycastMCPServer


@pytest.fixture
def server(registry):
    return RaycastMCPServer(registry)


@pytest.mark.asyncio
async def test_list_tools(server):
    tools = await server.list_tools()

    assert [t.name for t in tools] == [
        "create_extension",
        "build_extension",
        "publish_extension",
    ]
    assert all(t.description for t in tools)


@pytest.mark.asyncio
async def test_call_tool_returns_text_content(server, runner):
    content = await server.call_tool("publish_extension", {"path": "/x", "version": "2.0.0"})

    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text == "Successfully published extension version 2.0.0"


@pytest.mark.asyncio
async def test_unknown_tool_maps_to_method_not_found(server, runner):
    with pytest.raises(McpError) as exc_info:
        await server.call_tool("rename_extension", None)

    assert exc_info.value.error.code == METHOD_NOT_FOUND
    assert exc_info.value.error.message == "Unknown tool: rename_extension"
    assert runner.calls == []


@pytest.mark.asyncio
async def test_invalid_arguments_map_to_invalid_params(server, runner):
    with pytest.raises(McpError) as exc_info:
        await server.call_tool("create_extension", {"name": "foo"})

    assert exc_info.value.error.code == INVALID_PARAMS
    assert exc_info.value.error.message == "Invalid create_extension arguments"
    assert runner.calls == []


@pytest.mark.asyncio
async def test_handler_failure_maps_to_internal_error(failing_tools):
    _, tools = failing_tools(lambda cmd: True, message="Missing script: build")
    server = RaycastMCPServer(create_registry(tools))

    with pytest.raises(McpError) as exc_info:
        await server.call_tool("build_extension", {"path": "/x", "mode": "production"})

    assert exc_info.value.error.code == INTERNAL_ERROR
    assert "Missing script: build" in exc_info.value.error.message


def test_default_registry_is_built():
    server = RaycastMCPServer()
    assert server.registry.exists("create_extension")


def tool_request(name, arguments):
    return CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )


class TestCallToolRequestHandler:
    """The tools/call handler as the MCP session invokes it."""

    @pytest.mark.asyncio
    async def test_success_result(self, server, runner):
        handler = server.server.request_handlers[CallToolRequest]

        response = await handler(tool_request("build_extension", {"path": "/x"}))

        result = response.root
        assert isinstance(result, CallToolResult)
        assert result.isError is False
        assert result.content[0].text == "Successfully built extension in development mode"

    @pytest.mark.asyncio
    async def test_unknown_tool_keeps_error_code(self, server, runner):
        handler = server.server.request_handlers[CallToolRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(tool_request("nope", None))

        assert exc_info.value.error.code == METHOD_NOT_FOUND
        assert exc_info.value.error.message == "Unknown tool: nope"
        assert runner.calls == []

    @pytest.mark.asyncio
    async def test_invalid_arguments_keep_error_code(self, server, runner):
        handler = server.server.request_handlers[CallToolRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(tool_request("create_extension", {"name": "x"}))

        assert exc_info.value.error.code == INVALID_PARAMS
        assert exc_info.value.error.message == "Invalid create_extension arguments"

    @pytest.mark.asyncio
    async def test_missing_arguments_are_invalid(self, server, runner):
        handler = server.server.request_handlers[CallToolRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(tool_request("publish_extension", None))

        assert exc_info.value.error.code == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_collaborator_failure_keeps_error_code(self, failing_tools):
        _, tools = failing_tools(lambda cmd: cmd[0] == "ray", message="not logged in")
        server = RaycastMCPServer(create_registry(tools))
        handler = server.server.request_handlers[CallToolRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(tool_request("publish_extension", {"path": "/x"}))

        assert exc_info.value.error.code == INTERNAL_ERROR
        assert "not logged in" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_out_of_enum_mode_is_passed_through(self, server, runner):
        handler = server.server.request_handlers[CallToolRequest]

        response = await handler(
            tool_request("build_extension", {"path": "/x", "mode": "staging"})
        )

        assert response.root.isError is False
        assert response.root.content[0].text == "Successfully built extension in staging mode"
        assert runner.commands == [["npm", "run", "build"]]
