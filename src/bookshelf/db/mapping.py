# ABOUTME: The BookRecord dataclass and its conversion to and from SQLite rows.
# ABOUTME: Every books column is named exactly once in each direction.

from dataclasses import dataclass
from typing import Any


@dataclass
class BookRecord:
    """A cataloged book.

    ``id`` is None until the record has been inserted; storage assigns it and
    it never changes afterwards. All other fields are mutable and are written
    back one at a time by the update chain.
    """

    title: str
    publisher_id: str | None = None
    file_path: str | None = None
    author: str | None = None
    is_read: bool = False
    is_favorite: bool = False
    id: int | None = None


def record_to_row(record: BookRecord) -> dict[str, Any]:
    """Convert a BookRecord to a dict suitable for INSERT (id excluded)."""
    return {
        "title": record.title,
        "author": record.author,
        "file_path": record.file_path,
        "publisher_id": record.publisher_id,
        "is_read": int(record.is_read),
        "is_favorite": int(record.is_favorite),
    }


def row_to_record(row: Any) -> BookRecord:
    """Convert a database row (dict-like) to a BookRecord.

    SQLite stores BOOLEAN columns as integers, so the flags are coerced back.
    """
    return BookRecord(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        file_path=row["file_path"],
        publisher_id=row["publisher_id"],
        is_read=bool(row["is_read"]),
        is_favorite=bool(row["is_favorite"]),
    )
