# ABOUTME: The `bookshelf set` command: look up one book by a single field, then update it.
# ABOUTME: Runs exactly one lookup-then-update expression through the DSL.

from pathlib import Path

import click
from rich.console import Console

from bookshelf.cli.options import db_option, open_gateway
from bookshelf.dsl import BookFilter, BookUpdater, book
from bookshelf.errors import NotFoundError, StorageError, UsageError

console = Console()


@click.command("set")
@click.option("--by-publisher-id", default=None, help="Find the book by publisher id.")
@click.option("--by-title", default=None, help="Find the book by title.")
@click.option("--title", "new_title", default=None, help="New title.")
@click.option("--read/--unread", "is_read", default=None, help="Mark read or unread.")
@click.option(
    "--favorite/--not-favorite", "is_favorite", default=None, help="Mark or unmark as favorite."
)
@db_option
def set_book(
    by_publisher_id: str | None,
    by_title: str | None,
    new_title: str | None,
    is_read: bool | None,
    is_favorite: bool | None,
    db_path: Path | None,
) -> None:
    """Find one book by a single field and update it."""
    if by_publisher_id is None and by_title is None:
        console.print("[red]Give --by-publisher-id or --by-title.[/red]")
        raise SystemExit(1)
    if new_title is None and is_read is None and is_favorite is None:
        console.print("[yellow]Nothing to change.[/yellow]")
        return

    def criteria(f: BookFilter) -> None:
        # Both may be given; the filter rejects the second one.
        if by_publisher_id is not None:
            f.publisher_id(by_publisher_id)
        if by_title is not None:
            f.title(by_title)

    def updates(u: BookUpdater) -> None:
        if new_title is not None:
            u.title(new_title)
        if is_read is not None:
            u.is_read(is_read)
        if is_favorite is not None:
            u.is_favorite(is_favorite)

    with open_gateway(db_path, console) as gateway:
        try:
            updated = book(gateway).where(criteria).set(updates).book
        except (UsageError, NotFoundError, StorageError) as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    console.print(
        f"Updated [bold]{updated.title}[/bold] "
        f"({updated.publisher_id or 'no publisher id'}): "
        f"read={updated.is_read}, favorite={updated.is_favorite}"
    )
