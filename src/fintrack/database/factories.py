"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from fintrack.database.base import Database
from fintrack.database.memory import InMemoryDatabase
from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase
from fintrack.domain.errors import StorageError

logger = logging.getLogger(__name__)

MEMORY_URLS = ("memory", "memory://")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINTRACK_DB_PATH
            environment variable, then defaults to ~/.fintrack/fintrack.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("FINTRACK_DB_PATH")

    if database_path is None:
        # Default to ~/.fintrack/fintrack.db
        home = Path.home()
        db_dir = home / ".fintrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "fintrack.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(
    database_url: Optional[str] = None,
    database_path: Optional[str] = None,
    fallback_to_memory: bool = False,
) -> Database:
    """Create and connect the database selected by configuration.

    Args:
        database_url: SQLAlchemy URL, or "memory" for the in-memory backend.
            If None, checks FINTRACK_DATABASE_URL, then falls back to SQLite.
        database_path: SQLite file path used when no URL is configured
        fallback_to_memory: If True, use the in-memory backend when the SQL
            database cannot be reached instead of raising

    Returns:
        Connected database with its schema initialized

    Raises:
        StorageError: If the SQL database cannot be reached and
            fallback_to_memory is False
    """
    if database_url is None:
        database_url = os.environ.get("FINTRACK_DATABASE_URL")

    if database_url is not None and database_url.lower() in MEMORY_URLS:
        logger.info("Using in-memory storage")
        return InMemoryDatabase()

    try:
        if database_url is None:
            db = create_sqlite_database(database_path=database_path)
        else:
            db = SQLAlchemyDatabase(database_url)
        db.connect()
        db.initialize_schema()
        return db
    except (SQLAlchemyError, StorageError) as e:
        if not fallback_to_memory:
            if isinstance(e, StorageError):
                raise
            raise StorageError(f"Could not open database: {e}") from e
        logger.warning("Database connection failed, using in-memory storage: %s", e)
        return InMemoryDatabase()
