"""
Database initialization.

Creates all tables.  Production deployments run the Alembic migrations
instead; this is for local development and throwaway SQLite files.
"""

from loguru import logger
from sqlmodel import SQLModel

import app.db.base  # noqa: F401
from app.db.session import engine


def init_db() -> None:
    """Create every SQLModel table that does not exist yet."""
    logger.info("Creating database tables", url=str(engine.url))
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
