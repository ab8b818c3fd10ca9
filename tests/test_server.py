"""
End-to-end tests over an in-memory MCP session.

A real ``ClientSession`` talks to the server built by ``create_server``,
so these tests exercise the JSON-RPC framing, the handshake and the error
mapping exactly as a client sees them.
"""

import pytest
from mcp import types
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session

from cat_database_mcp.database import DatabaseManager
from cat_database_mcp.server import build_dispatcher, create_server

pytestmark = pytest.mark.mcp_protocol


@pytest.fixture
def server(dispatcher, test_config):
    return create_server(dispatcher, test_config)


class TestInitialize:
    @pytest.mark.asyncio
    async def test_initialize_reports_identity(self, server):
        async with create_connected_server_and_client_session(server) as client:
            result = await client.initialize()

        assert result.serverInfo.name == "test-cat-database"
        assert result.serverInfo.version == "0.0.1-test"
        # The session echoes the version the client asked for when the SDK supports it
        assert result.protocolVersion == types.LATEST_PROTOCOL_VERSION
        assert result.capabilities.tools is not None
        assert result.capabilities.resources is None
        assert result.capabilities.prompts is None
        assert "cat" in result.instructions.lower()


class TestToolsOverSession:
    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        async with create_connected_server_and_client_session(server) as client:
            result = await client.list_tools()

        assert [tool.name for tool in result.tools] == [
            "list_all_cats",
            "get_cat_by_id",
            "search_by_breed",
            "get_indoor_cats",
        ]
        assert result.nextCursor is None

    @pytest.mark.asyncio
    async def test_call_tool_success(self, server):
        async with create_connected_server_and_client_session(server) as client:
            result = await client.call_tool("get_cat_by_id", {"id": 2})

        assert result.isError is False
        assert result.content[0].text.startswith("Cat details (ID: 2):")
        assert '"name": "Shiro"' in result.content[0].text

    @pytest.mark.asyncio
    async def test_not_found_is_a_result(self, server):
        async with create_connected_server_and_client_session(server) as client:
            result = await client.call_tool("get_cat_by_id", {"id": 999})

        assert result.isError is False
        assert result.content[0].text == "Cat with ID 999 not found"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_method_not_found(self, server):
        async with create_connected_server_and_client_session(server) as client:
            with pytest.raises(McpError) as exc_info:
                await client.call_tool("delete_cat", {"id": 1})

        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
        assert "delete_cat" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_missing_parameter_is_invalid_params(self, server):
        async with create_connected_server_and_client_session(server) as client:
            with pytest.raises(McpError) as exc_info:
                await client.call_tool("search_by_breed", {})

        assert exc_info.value.error.code == types.INVALID_PARAMS
        assert "breed" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_session_survives_errors(self, server):
        async with create_connected_server_and_client_session(server) as client:
            with pytest.raises(McpError):
                await client.call_tool("get_cat_by_id", {"id": "two"})
            result = await client.call_tool("get_indoor_cats", {})

        assert result.content[0].text.startswith("Indoor cats (3 cats):")


def test_build_dispatcher_seeds_database():
    manager = DatabaseManager("sqlite://")
    try:
        dispatcher = build_dispatcher(manager)
        assert dispatcher.db_manager is manager
        result = dispatcher.call_tool("list_all_cats", {})
        assert result.content[0].text.startswith("All registered cats (4 cats):")
    finally:
        manager.close()
