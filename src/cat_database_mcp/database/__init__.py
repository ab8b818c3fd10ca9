"""
Database package for the Cat Database MCP Server.

This package provides:
- SQLAlchemy schema definition (schema.py)
- Session management and connection handling (session.py)
- The cat repository the tools read from (repository.py)
- Sample data loaded at startup (seed.py)
"""

from .repository import (
    CatPredicate,
    CatRepository,
    DuplicateError,
    RepositoryException,
    mcp_safe_query,
)
from .schema import Base, CatRecord
from .seed import SAMPLE_CATS, seed_database
from .session import DatabaseManager

__all__ = [
    "SAMPLE_CATS",
    "Base",
    "CatPredicate",
    "CatRecord",
    "CatRepository",
    "DatabaseManager",
    "DuplicateError",
    "RepositoryException",
    "mcp_safe_query",
    "seed_database",
]
