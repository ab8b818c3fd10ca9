"""
Repository pattern implementation for the Cat Database MCP Server.

This module provides the data access layer the tool handlers run against.
Handlers only ever see three read operations:

1. ``get(id)`` - lookup by key, ``None`` when absent
2. ``all()`` - every cat, ordered by id so results are reproducible
3. ``filter(predicate)`` - every cat the predicate accepts, in ``all()`` order

Methods return frozen ``Cat`` Pydantic models, so nothing a handler does can
write back to the database by accident.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.cat import Cat
from .schema import CatRecord

logger = logging.getLogger(__name__)

CatPredicate = Callable[[Cat], bool]

T = TypeVar("T")


class RepositoryException(Exception):
    """Base exception for repository operations."""


class DuplicateError(RepositoryException):
    """Raised when attempting to create a duplicate entity."""


def mcp_safe_query(session: Session, query_func: Callable[[Session], T], error_msg: str) -> T:
    """
    Execute a query with MCP-appropriate error handling.

    Args:
        session: The database session
        query_func: Function that performs the query
        error_msg: Error message prefix for the raised exception

    Returns:
        Query result

    Raises:
        RepositoryException: If the query fails
    """
    try:
        return query_func(session)
    except Exception as e:
        logger.exception("Query failed")
        raise RepositoryException(f"{error_msg}: Database query failed") from e


class CatRepository:
    """
    Read access to the cats table, plus the single insert used for seeding.

    A repository wraps one session; create a new one per tool call.
    """

    def __init__(self, session: Session):
        """Initialize repository with database session."""
        self.session = session

    def _to_model(self, record: CatRecord) -> Cat:
        return Cat.model_validate(record, from_attributes=True)

    def get(self, cat_id: int) -> Cat | None:
        """
        Get a cat by ID.

        Args:
            cat_id: Numeric cat identifier

        Returns:
            Cat model or None if not found
        """
        record = mcp_safe_query(
            self.session,
            lambda s: s.get(CatRecord, cat_id),
            f"Failed to get cat {cat_id}",
        )
        if record is None:
            return None
        return self._to_model(record)

    def all(self) -> list[Cat]:
        """Return every cat, ordered by id."""
        records = mcp_safe_query(
            self.session,
            lambda s: s.execute(select(CatRecord).order_by(CatRecord.id)).scalars().all(),
            "Failed to list cats",
        )
        return [self._to_model(record) for record in records]

    def filter(self, predicate: CatPredicate) -> list[Cat]:
        """
        Return every cat for which ``predicate`` is true.

        The predicate runs in Python against the Pydantic model, so callers
        can express any condition without knowing the table layout.
        """
        return [cat for cat in self.all() if predicate(cat)]

    def count(self) -> int:
        """Total number of cats in the repository."""
        return mcp_safe_query(
            self.session,
            lambda s: s.execute(select(func.count()).select_from(CatRecord)).scalar_one(),
            "Failed to count cats",
        )

    def add(self, cat: Cat) -> Cat:
        """
        Insert a new cat.

        Raises:
            DuplicateError: If a cat with the same id already exists
        """
        if self.session.get(CatRecord, cat.id) is not None:
            raise DuplicateError(f"Cat with ID {cat.id} already exists")

        record = CatRecord(**cat.model_dump())
        self.session.add(record)
        try:
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateError(f"Cat with ID {cat.id} already exists") from e
        return self._to_model(record)
