"""
Database initialization script.

Creates every table of the data model. Run this script when setting up a
database for the first time:

    python -m sportpredict.db.init_db
"""

from typing import Optional

from sqlalchemy.engine import Engine

# Importing the models registers their tables on Base.metadata
from sportpredict.db import models  # noqa: F401
from sportpredict.db.base import Base
from sportpredict.db.session import get_engine
from sportpredict.core.logger import setup_logger

logger = setup_logger("sportpredict.db.init_db")


def init_db(engine: Optional[Engine] = None) -> None:
    """Initialize the database by creating all tables."""
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized with tables: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    init_db()
