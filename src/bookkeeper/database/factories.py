"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from bookkeeper.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "BOOKKEEPER_DB_PATH"


def default_database_path() -> str:
    """Return the database path from BOOKKEEPER_DB_PATH or ~/.bookkeeper/bookkeeper.db."""
    database_path = os.environ.get(DB_PATH_ENV)
    if database_path:
        return database_path

    db_dir = Path.home() / ".bookkeeper"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "bookkeeper.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks BOOKKEEPER_DB_PATH
            environment variable, then defaults to ~/.bookkeeper/bookkeeper.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = default_database_path()

    Path(database_path).parent.mkdir(parents=True, exist_ok=True)
    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
