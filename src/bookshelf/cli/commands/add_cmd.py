# ABOUTME: The `bookshelf add` command for cataloging a new book.
# ABOUTME: Inserts one record and prints the identifier storage assigned.

from pathlib import Path

import click
from rich.console import Console

from bookshelf.cli.options import db_option, open_gateway
from bookshelf.db.mapping import BookRecord
from bookshelf.errors import StorageError

console = Console()


@click.command("add")
@click.argument("title")
@click.option("--author", default=None, help="Book author.")
@click.option("--publisher-id", default=None, help="Publisher identifier, e.g. AB-1001.")
@click.option("--path", "file_path", default=None, help="Path to the book file.")
@click.option("--read", "is_read", is_flag=True, help="Mark the book as read.")
@click.option("--favorite", "is_favorite", is_flag=True, help="Mark the book as a favorite.")
@db_option
def add(
    title: str,
    author: str | None,
    publisher_id: str | None,
    file_path: str | None,
    is_read: bool,
    is_favorite: bool,
    db_path: Path | None,
) -> None:
    """Add a book to the catalog."""
    record = BookRecord(
        title=title,
        author=author,
        publisher_id=publisher_id,
        file_path=file_path,
        is_read=is_read,
        is_favorite=is_favorite,
    )
    with open_gateway(db_path, console) as gateway:
        try:
            book_id = gateway.insert(record)
        except StorageError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    console.print(f"Added [bold]{title}[/bold] as book {book_id}.")
