"""Test configuration and fixtures for the Cat Database MCP Server.

Fixture layout:
1. Isolated databases - every test gets its own seeded in-memory SQLite
2. Configuration overrides - test-specific server configuration
3. Observability - Logfire configured locally, never exporting
4. Environment cleanup - no CAT_DATABASE_* leakage between tests
"""

import os
from collections.abc import Generator

import pytest
from sqlalchemy.orm import Session

from cat_database_mcp.config import ServerConfig, reset_config
from cat_database_mcp.database import CatRepository, DatabaseManager, seed_database
from cat_database_mcp.observability import ObservabilityConfig, initialize_observability
from cat_database_mcp.tools import CAT_TOOLS, ToolDispatcher

# === Pytest Configuration ===


@pytest.fixture(scope="session", autouse=True)
def local_observability() -> None:
    """Configure Logfire once so spans are created but nothing is sent."""
    initialize_observability(
        ObservabilityConfig(enabled=True, send_to_logfire=False, console_output=False)
    )


# === Test Database Fixtures ===


@pytest.fixture
def empty_db_manager() -> Generator[DatabaseManager, None, None]:
    """An in-memory database with the schema created but no rows."""
    manager = DatabaseManager("sqlite://")
    manager.init_database()
    yield manager
    manager.close()


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """An in-memory database seeded with the four sample cats."""
    manager = DatabaseManager("sqlite://")
    seed_database(manager)
    yield manager
    manager.close()


@pytest.fixture
def db_session(db_manager: DatabaseManager) -> Generator[Session, None, None]:
    with db_manager.session_scope() as session:
        yield session


@pytest.fixture
def repo(db_session: Session) -> CatRepository:
    return CatRepository(db_session)


@pytest.fixture
def dispatcher(db_manager: DatabaseManager) -> ToolDispatcher:
    """The production tool set bound to a seeded database."""
    return ToolDispatcher(CAT_TOOLS, db_manager)


# === Configuration Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide an environment without CAT_DATABASE_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("CAT_DATABASE_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(clean_env) -> Generator[ServerConfig, None, None]:
    """Provide a test-specific MCP server configuration."""
    reset_config()

    config = ServerConfig(
        _env_file=None,
        server_name="test-cat-database",
        server_version="0.0.1-test",
        database_url="sqlite://",
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()
