"""
Cat Database MCP Server Package.

An MCP (Model Context Protocol) server exposing four tools over a small,
in-memory cat database.

Key Components:
- models: Pydantic models for data validation and serialization
- database: SQLAlchemy schema, sessions, repository and sample data
- config: Configuration management with Pydantic v2
- tools: tool catalog, argument validation and dispatch
- handshake: initialize response (identity, protocol version, capabilities)
- observability: Logfire spans and metrics
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
