"""
Database engine and schema for the SQL packing adapters.

Tables:
    packing_lists — one row per list; ``name`` carries a UNIQUE constraint
                    so duplicate names are rejected by the storage layer.
    packing_items — items of a list, ordered by ``position``.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS packing_lists (
        id VARCHAR(36) PRIMARY KEY,
        name VARCHAR(200) NOT NULL UNIQUE,
        days INTEGER NOT NULL,
        gender VARCHAR(16) NOT NULL,
        temperature DOUBLE PRECISION NOT NULL,
        city VARCHAR(100) NOT NULL,
        country VARCHAR(100) NOT NULL,
        version INTEGER NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS packing_items (
        packing_list_id VARCHAR(36) NOT NULL
            REFERENCES packing_lists (id) ON DELETE CASCADE,
        position INTEGER NOT NULL,
        name VARCHAR(200) NOT NULL,
        quantity INTEGER NOT NULL,
        is_packed BOOLEAN NOT NULL DEFAULT FALSE,
        PRIMARY KEY (packing_list_id, name)
    )
    """,
)


def build_engine(database_url: str) -> AsyncEngine:
    """Build an async SQLAlchemy engine for the given URL."""
    return create_async_engine(database_url, pool_pre_ping=True)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the packing tables if they do not exist yet."""
    async with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(text(statement))
    logger.info("Packing schema ready")
