"""Cat Database MCP Server - Server Wiring and Entry Point

Connects the tool dispatcher to the MCP low-level server and runs it over
stdio.

MCP PROTOCOL OVERVIEW:
1. Clients connect over a transport (stdio here)
2. The session performs the initialize handshake
3. ``tools/list`` and ``tools/call`` requests are routed to the dispatcher
4. Responses and errors travel back as JSON-RPC 2.0 messages

The dispatcher is registered directly as the request handler for
``tools/list`` and ``tools/call``. A ``ToolCallError`` raised by the
dispatcher is an ``McpError``, which the server sends back as a JSON-RPC
error response carrying its code, message and data.
"""

import logging
import signal
import sys
from typing import Any

import anyio
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from cat_database_mcp.config import ServerConfig, get_config
from cat_database_mcp.database import DatabaseManager, seed_database
from cat_database_mcp.handshake import build_handshake, initialization_options
from cat_database_mcp.observability import initialize_observability
from cat_database_mcp.tools import CAT_TOOLS, ToolDispatcher

# Logs go to stderr; stdout carries the stdio transport
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger(__name__)


# =============================================================================
# SERVER CONSTRUCTION
# =============================================================================


def build_dispatcher(db_manager: DatabaseManager) -> ToolDispatcher:
    """Seed the repository and bind the cat tools to it."""
    seed_database(db_manager)
    return ToolDispatcher(CAT_TOOLS, db_manager)


def create_server(dispatcher: ToolDispatcher, config: ServerConfig | None = None) -> Server:
    """
    Create the MCP server and route tool requests to ``dispatcher``.

    Only ``tools/list`` and ``tools/call`` are registered, so the server
    advertises the tools capability and nothing else.
    """
    config = config or get_config()
    server: Server = Server(
        config.server_name,
        version=config.server_version,
        instructions=config.instructions,
    )

    async def handle_list_tools(request: types.ListToolsRequest) -> types.ServerResult:
        cursor = request.params.cursor if request.params else None
        return types.ServerResult(dispatcher.list_tools(cursor))

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        return types.ServerResult(
            dispatcher.call_tool(request.params.name, request.params.arguments)
        )

    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


# =============================================================================
# TRANSPORT
# =============================================================================


async def serve_stdio(server: Server, options: InitializationOptions) -> None:
    """Serve one session over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, options)


def run_stdio_server(config: ServerConfig) -> None:
    """Run the MCP server using stdio transport.

    Stdin receives JSON-RPC requests, stdout sends responses.
    """
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled - verbose protocol logging active")
    else:
        logging.getLogger().setLevel(config.effective_log_level)
        logging.getLogger("mcp").setLevel(logging.WARNING)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    db_manager = DatabaseManager(config.database_url)
    try:
        dispatcher = build_dispatcher(db_manager)
        server = create_server(dispatcher, config)
        options = initialization_options(build_handshake(config))

        logger.info("MCP Server ready and waiting for connections...")
        anyio.run(serve_stdio, server, options)
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)
    finally:
        db_manager.close()


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def main() -> None:
    """Main entry point for the MCP server.

    Started via ``cat-database-mcp`` or ``python -m cat_database_mcp.server``.
    """
    try:
        config = get_config()
        initialize_observability(service_version=config.server_version)

        logger.info("=" * 60)
        logger.info("Cat Database MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        if config.transport == "stdio":
            run_stdio_server(config)
        else:
            logger.error("Unsupported transport: %s", config.transport)
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
