# ABOUTME: The storage gateway: the only component that issues SQL against the books table.
# ABOUTME: Owns one SQLite session for its lifetime and wraps statement failures in StorageError.

import logging
import sqlite3
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from bookshelf.db.connection import open_library
from bookshelf.db.mapping import BookRecord, record_to_row, row_to_record
from bookshelf.errors import ConnectivityError, StorageError

logger = logging.getLogger(__name__)

# Fields that may be used for single-field equality lookups, mapped to columns.
LOOKUP_COLUMNS = {
    "publisher_id": "publisher_id",
    "title": "title",
    "author": "author",
    "file_path": "file_path",
}


class BookGateway:
    """Typed CRUD over the books table, backed by a single sqlite3 connection.

    The connection is opened when the gateway is constructed and released by
    ``close()``. Use the gateway as a context manager to release it on every
    exit path::

        with BookGateway(path) as gateway:
            gateway.insert(BookRecord(title="Dune"))

    Every mutating call commits before returning.
    """

    def __init__(self, path: Path | str) -> None:
        self._conn: sqlite3.Connection | None = open_library(path)
        self._path = path

    def __enter__(self) -> "BookGateway":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        """Release the session. Calling it again is a no-op."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()
        logger.debug("Closed gateway for %s", self._path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise ConnectivityError("Gateway is closed")
        return self._conn

    def _execute(
        self, operation: str, sql: str, params: Sequence[Any] = (), *, commit: bool = False
    ) -> sqlite3.Cursor:
        """Run one statement, committing if asked, and wrap any sqlite3 failure."""
        conn = self._connection()
        logger.debug("%s: %s %r", operation, sql, params)
        try:
            cursor = conn.execute(sql, params)
            if commit:
                conn.commit()
        except sqlite3.Error as exc:
            logger.warning("%s failed: %s", operation, exc)
            if commit:
                self._rollback(conn, operation)
            raise StorageError(operation, exc) from exc
        return cursor

    def _rollback(self, conn: sqlite3.Connection, operation: str) -> None:
        # A failed commit leaves the transaction open; the next commit would persist it.
        try:
            conn.rollback()
        except sqlite3.Error as exc:
            logger.warning("Rollback after %s failed: %s", operation, exc)

    def _fetch(
        self,
        operation: str,
        sql: str,
        params: Sequence[Any] = (),
        convert: Callable[[Any], Any] = row_to_record,
    ) -> list[Any]:
        """Run a query and convert each row, consuming the cursor exactly once."""
        cursor = self._execute(operation, sql, params)
        try:
            return [convert(row) for row in cursor]
        except sqlite3.Error as exc:
            raise StorageError(operation, exc) from exc

    def insert(self, record: BookRecord) -> int:
        """Add a book to the catalog.

        Args:
            record: The book to store. Its ``id`` must still be None.

        Returns:
            The identifier assigned by storage.

        Raises:
            ValueError: If the record already carries an identifier.
            StorageError: If the INSERT fails (e.g. a NULL title).
        """
        if record.id is not None:
            raise ValueError(f"Book already has id {record.id}; insert expects a new record")

        row = record_to_row(record)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        cursor = self._execute(
            "insert",
            f"INSERT INTO books ({columns}) VALUES ({placeholders})",
            list(row.values()),
            commit=True,
        )
        return cursor.lastrowid  # type: ignore[return-value]

    def find_by_field(self, field: str, value: str) -> BookRecord | None:
        """Return the book whose ``field`` equals ``value``, or None.

        When several books match, the one with the lowest id is returned.

        Raises:
            ValueError: If ``field`` is not a lookup field.
        """
        column = LOOKUP_COLUMNS.get(field)
        if column is None:
            raise ValueError(
                f"Cannot look up books by '{field}'; expected one of {sorted(LOOKUP_COLUMNS)}"
            )
        records = self._fetch(
            f"find_by_field({field})",
            f"SELECT * FROM books WHERE {column} = ? ORDER BY id LIMIT 1",
            (value,),
        )
        return records[0] if records else None

    def get_by_id(self, book_id: int) -> BookRecord | None:
        """Retrieve a book by its identifier."""
        records = self._fetch("get_by_id", "SELECT * FROM books WHERE id = ?", (book_id,))
        return records[0] if records else None

    def _update(self, operation: str, assignments: dict[str, Any], book_id: int) -> int:
        set_clause = ", ".join(f"{column} = ?" for column in assignments)
        cursor = self._execute(
            operation,
            f"UPDATE books SET {set_clause} WHERE id = ?",
            [*assignments.values(), book_id],
            commit=True,
        )
        return cursor.rowcount

    def update_title(self, book_id: int, title: str) -> int:
        """Set a book's title. Returns the affected row count."""
        return self._update("update_title", {"title": title}, book_id)

    def update_status(self, book_id: int, is_read: bool, is_favorite: bool) -> int:
        """Write both status flags together. Returns the affected row count."""
        return self._update(
            "update_status",
            {"is_read": int(is_read), "is_favorite": int(is_favorite)},
            book_id,
        )

    def update_author(self, book_id: int, author: str | None) -> int:
        return self._update("update_author", {"author": author}, book_id)

    def update_file_path(self, book_id: int, file_path: str | None) -> int:
        return self._update("update_file_path", {"file_path": file_path}, book_id)

    def update_publisher_id(self, book_id: int, publisher_id: str | None) -> int:
        return self._update("update_publisher_id", {"publisher_id": publisher_id}, book_id)

    def list_all_ordered_by_publisher(self) -> list[BookRecord]:
        """Return all books ordered by publisher id (plain text comparison)."""
        return self._fetch(
            "list_all_ordered_by_publisher",
            "SELECT * FROM books ORDER BY publisher_id, id",
        )

    def list_by_author(self, author: str) -> list[BookRecord]:
        """Return one author's books ordered by publisher id."""
        return self._fetch(
            "list_by_author",
            "SELECT * FROM books WHERE author = ? ORDER BY publisher_id, id",
            (author,),
        )

    def list_distinct_authors(self) -> list[str]:
        """Return each author once, alphabetically sorted."""
        return self._fetch(
            "list_distinct_authors",
            "SELECT DISTINCT author FROM books WHERE author IS NOT NULL ORDER BY author",
            convert=lambda row: row["author"],
        )

    def group_all_by_author(self) -> dict[str | None, list[BookRecord]]:
        """Group every book by author, keeping publisher order within each group."""
        groups: dict[str | None, list[BookRecord]] = {}
        for record in self.list_all_ordered_by_publisher():
            groups.setdefault(record.author, []).append(record)
        return groups
