"""
Session handshake for the Cat Database MCP Server.

MCP INITIALIZATION SEQUENCE:
1. Client sends 'initialize' with its protocol version and capabilities
2. Server answers with protocolVersion, capabilities, serverInfo, instructions
3. Client sends 'initialized' and normal requests begin

This server only offers tools, so the advertised capabilities contain a
``tools`` entry and nothing else. The tool list never changes at runtime,
hence ``listChanged`` is false.
"""

import logging

from mcp import types
from mcp.server.models import InitializationOptions
from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)


def server_capabilities() -> types.ServerCapabilities:
    return types.ServerCapabilities(tools=types.ToolsCapability(listChanged=False))


def build_handshake(config: ServerConfig | None = None) -> types.InitializeResult:
    """
    Describe this server for the initialize response.

    The returned object has exactly the handshake fields: protocolVersion,
    capabilities (tools only), serverInfo and instructions.
    """
    config = config or get_config()

    if config.protocol_version not in SUPPORTED_PROTOCOL_VERSIONS:
        logger.warning(
            "Configured protocol version %s is not supported by the MCP SDK (supported: %s)",
            config.protocol_version,
            ", ".join(SUPPORTED_PROTOCOL_VERSIONS),
        )

    return types.InitializeResult(
        protocolVersion=config.protocol_version,
        capabilities=server_capabilities(),
        serverInfo=types.Implementation(**config.server_info),
        instructions=config.instructions,
    )


def initialization_options(handshake: types.InitializeResult) -> InitializationOptions:
    """Options the stdio session uses to answer 'initialize'.

    The session negotiates the protocol version itself: it echoes the client's
    version when the SDK supports it and falls back to the SDK's latest.
    """
    return InitializationOptions(
        server_name=handshake.serverInfo.name,
        server_version=handshake.serverInfo.version,
        capabilities=handshake.capabilities,
        instructions=handshake.instructions,
    )
