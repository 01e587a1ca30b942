"""
Database initialization.

Creates all tables.  Production schemas are managed by Alembic; this is
for local development and demos.
"""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import coachweek.db.base  # noqa: F401  (registers every table on SQLModel.metadata)


def init_db(engine: Engine) -> None:
    """Create every SQLModel table that does not exist yet."""
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info(f"Tables ready: {', '.join(sorted(SQLModel.metadata.tables))}")


if __name__ == "__main__":
    from coachweek.db.session import engine as default_engine

    init_db(default_engine)
