"""
Cat Database MCP Server Models.

Pydantic models for the entities the server exposes. These provide:

1. Data validation using Pydantic v2
2. Serialization to JSON for MCP tool responses
3. Type hints for all fields
"""

from .cat import Cat

__all__ = [
    "Cat",
]
