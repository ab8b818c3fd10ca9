"""
Database session management for the Cat Database MCP Server.

The cat table lives in in-memory SQLite by default. Every connection to
``sqlite://`` opens its own empty database, so the engine is built on
``StaticPool``: all sessions share one connection and see the seeded rows.

Each tool call runs inside one ``session_scope``; repository errors raised
inside it roll the session back and propagate to the dispatcher.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import get_config
from .schema import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Owns the engine and session factory backing the cat repository.

    One manager is created at startup and handed to the dispatcher.
    """

    def __init__(self, database_url: str | None = None):
        self.database_url = database_url or get_config().database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        """Lazily created engine; SQLite URLs share a single connection."""
        if self._engine is None:
            if self.database_url.startswith("sqlite"):
                self._engine = create_engine(
                    self.database_url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            else:
                self._engine = create_engine(self.database_url, pool_pre_ping=True)
            logger.info("Database engine created: %s", self._engine.url)
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            # Cat records stay readable after the scope commits
            self._session_factory = sessionmaker(
                bind=self.engine,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        One unit of work: commit on success, roll back and re-raise on error.

        ```python
        with db_manager.session_scope() as session:
            cat = CatRepository(session).get(1)
        ```
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            logger.debug("Rolling back database session")
            session.rollback()
            raise
        finally:
            session.close()

    def init_database(self) -> None:
        """Create the cats table if it does not exist yet."""
        Base.metadata.create_all(bind=self.engine)
        logger.debug("Database schema ready")

    def close(self) -> None:
        """Dispose of the engine. Called when the MCP server shuts down."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None
