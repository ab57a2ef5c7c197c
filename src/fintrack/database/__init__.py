"""Database layer for fintrack application."""

from fintrack.database.base import Database
from fintrack.database.memory import InMemoryDatabase
from fintrack.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "InMemoryDatabase", "create_database", "create_sqlite_database"]
