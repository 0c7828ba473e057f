# ABOUTME: SQLite connection management for the Bookshelf catalog.
# ABOUTME: Opens or creates the database, applies the schema, and reports open failures.

import logging
import sqlite3
from pathlib import Path

from bookshelf.db.schema import SCHEMA
from bookshelf.errors import ConnectivityError

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the books table has already been created."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='books'"
    )
    return cursor.fetchone() is not None


def open_library(path: Path | str) -> sqlite3.Connection:
    """Open or create the Bookshelf catalog database.

    Creates the database file and parent directories if they don't exist and
    applies the schema on first creation. Passing ``":memory:"`` opens a
    private in-memory database.

    Args:
        path: Path to the database file.

    Returns:
        A sqlite3.Connection using sqlite3.Row for dict-like column access.

    Raises:
        ConnectivityError: If the database cannot be opened or initialized.
    """
    target = str(path)

    try:
        if target != MEMORY_DB:
            Path(target).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(target)
    except (OSError, sqlite3.Error) as exc:
        raise ConnectivityError(f"Cannot open database {target}: {exc}") from exc

    try:
        conn.row_factory = sqlite3.Row
        if target != MEMORY_DB:
            conn.execute("PRAGMA journal_mode=WAL")
        if not _schema_exists(conn):
            logger.debug("Applying schema to %s", target)
            conn.executescript(SCHEMA)
    except sqlite3.Error as exc:
        conn.close()
        raise ConnectivityError(f"Cannot initialize database {target}: {exc}") from exc

    return conn
