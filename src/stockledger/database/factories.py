"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from stockledger.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENVVAR = "STOCKLEDGER_DB_PATH"


def default_database_path() -> str:
    """Return ~/.stockledger/stockledger.db, creating the directory if needed."""
    db_dir = Path.home() / ".stockledger"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "stockledger.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks STOCKLEDGER_DB_PATH
            environment variable, then defaults to ~/.stockledger/stockledger.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENVVAR)

    if database_path is None:
        database_path = default_database_path()

    database = SQLAlchemyDatabase(f"sqlite:///{database_path}")
    database.database_path = database_path
    return database
