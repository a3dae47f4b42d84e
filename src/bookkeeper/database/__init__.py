"""Database layer for bookkeeper application."""

from bookkeeper.database.base import Database, RowConstraintError
from bookkeeper.database.factories import create_sqlite_database

__all__ = ["Database", "RowConstraintError", "create_sqlite_database"]
