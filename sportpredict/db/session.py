"""
Database Session Management Module.

This module handles the creation of the database engine and sessions using
SQLAlchemy. The engine is built on first use from settings.DATABASE_URL, so
importing this module never opens a connection or requires a driver.

Usage:
- Obtain a session with the get_db generator, which always closes it:
  `db = next(get_db())`, or wire it as a dependency in a consuming service.
"""

from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from sportpredict.core.config import settings
from sportpredict.core.logger import setup_logger

logger = setup_logger("sportpredict.db.session")


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """
    Build the process-wide SQLAlchemy engine from settings.

    Returns:
        Engine: The engine bound to settings.DATABASE_URL.
    """
    logger.info(f"Creating database engine for environment '{settings.APP_ENV}'")
    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=settings.DB_POOL_PRE_PING,  # Check connection before using it
        pool_recycle=300,                         # Recycle connections every 5 minutes
        echo=settings.SQL_ECHO,
    )


# Sessions are bound to an engine when they are created
SessionLocal = sessionmaker(autoflush=False)


def get_db(engine: Optional[Engine] = None) -> Generator[Session, None, None]:
    """
    Provide a database session and ensure it is closed after use, even if
    exceptions occur while it is in use.

    Args:
        engine: Engine to bind the session to. Defaults to get_engine().

    Yields:
        Session: A SQLAlchemy database session.
    """
    db = SessionLocal(bind=engine or get_engine())
    try:
        yield db
    finally:
        db.close()
