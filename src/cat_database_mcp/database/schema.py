"""
SQLAlchemy database schema for the Cat Database MCP Server.

The cat table mirrors the ``Cat`` Pydantic model. The database is in-memory
by default, so the table exists only for the lifetime of the server process;
it is created and seeded once at startup and read by every tool call.
"""

from sqlalchemy import Boolean, CheckConstraint, Column, Index, Integer, String
from sqlalchemy.orm import declarative_base, validates

# Base class for all SQLAlchemy models
Base = declarative_base()


class CatRecord(Base):
    """
    Cats table - stores every cat the server knows about.

    MCP Usage:
    - Tools: list_all_cats, get_cat_by_id, search_by_breed, get_indoor_cats
    - Read-only after seeding; inserts only happen through seed_database
    """

    __tablename__ = "cats"

    # Numeric id is the identity used by get_cat_by_id
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
    breed = Column(String(100), nullable=False)
    color = Column(String(100), nullable=False)
    is_indoor = Column(Boolean, nullable=False, default=True)
    favorite_toy = Column(String(200), nullable=False)

    __table_args__ = (
        Index("idx_cat_breed", "breed"),
        Index("idx_cat_indoor", "is_indoor"),
        CheckConstraint("id >= 0", name="check_cat_id_non_negative"),
        CheckConstraint("age >= 0", name="check_cat_age_non_negative"),
    )

    @validates("name", "breed", "color")
    def validate_not_blank(self, key, value):
        if value is None or not str(value).strip():
            raise ValueError(f"Cat {key} must not be blank")
        return value

    def __repr__(self) -> str:
        return f"<CatRecord id={self.id} name={self.name!r} breed={self.breed!r}>"
