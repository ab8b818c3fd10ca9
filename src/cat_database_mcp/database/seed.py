"""
Sample data for the Cat Database MCP Server.

The server keeps its data in memory, so the sample set is loaded on every
startup. Seeding is idempotent: an already-populated table is left alone.
"""

import logging

from ..models.cat import Cat
from .repository import CatRepository
from .session import DatabaseManager

logger = logging.getLogger(__name__)

SAMPLE_CATS: tuple[Cat, ...] = (
    Cat(
        id=1,
        name="Mike",
        age=3,
        breed="Calico",
        color="Calico",
        is_indoor=True,
        favorite_toy="Mouse toy",
    ),
    Cat(
        id=2,
        name="Shiro",
        age=5,
        breed="Persian",
        color="White",
        is_indoor=True,
        favorite_toy="Yarn ball",
    ),
    Cat(
        id=3,
        name="Kuro",
        age=2,
        breed="Black cat",
        color="Black",
        is_indoor=False,
        favorite_toy="Butterfly",
    ),
    Cat(
        id=4,
        name="Chatora",
        age=7,
        breed="Orange tabby",
        color="Orange tabby",
        is_indoor=True,
        favorite_toy="Catnip",
    ),
)


def seed_database(manager: DatabaseManager, cats: tuple[Cat, ...] = SAMPLE_CATS) -> int:
    """
    Create the schema and load ``cats`` into an empty database.

    Returns:
        Number of cats inserted (0 when the table was already populated)
    """
    manager.init_database()

    with manager.session_scope() as session:
        repo = CatRepository(session)
        existing = repo.count()
        if existing:
            logger.info("Database already holds %d cats, skipping seed", existing)
            return 0

        for cat in cats:
            repo.add(cat)

    logger.info("Seeded %d cats", len(cats))
    return len(cats)
