"""Database layer for multiluz application."""

from multiluz.database.base import Database
from multiluz.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
