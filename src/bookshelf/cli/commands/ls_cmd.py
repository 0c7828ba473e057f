# ABOUTME: The `bookshelf ls` command for listing cataloged books.
# ABOUTME: Shows a Rich table in publisher-id order, optionally grouped by author.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bookshelf.cli.options import db_option, open_gateway
from bookshelf.db.mapping import BookRecord
from bookshelf.errors import StorageError

console = Console()


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def _book_table(records: list[BookRecord], title: str | None = None) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Publisher ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Path", style="dim")
    table.add_column("Read", justify="center")
    table.add_column("Fav", justify="center")

    for record in records:
        table.add_row(
            record.publisher_id or "",
            record.title,
            record.author or "[dim]unknown[/dim]",
            record.file_path or "",
            _flag(record.is_read),
            _flag(record.is_favorite),
        )
    return table


@click.command("ls")
@db_option
@click.option("--author", "author_filter", default=None, help="Only show this author's books.")
@click.option("--grouped", is_flag=True, help="Print one table per author.")
@click.option(
    "--title-contains",
    "title_fragment",
    default=None,
    help="Only show books whose title contains this text.",
)
def ls(
    db_path: Path | None,
    author_filter: str | None,
    grouped: bool,
    title_fragment: str | None,
) -> None:
    """List books ordered by publisher id."""
    with open_gateway(db_path, console) as gateway:
        try:
            if author_filter:
                groups = {author_filter: gateway.list_by_author(author_filter)}
            elif grouped:
                groups = gateway.group_all_by_author()
            else:
                groups = {None: gateway.list_all_ordered_by_publisher()}
        except StorageError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    if title_fragment:
        groups = {
            author: [r for r in records if title_fragment in r.title]
            for author, records in groups.items()
        }
    groups = {author: records for author, records in groups.items() if records}

    if not groups:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    if grouped:
        for author in sorted(groups, key=lambda a: (a is None, a or "")):
            console.print(_book_table(groups[author], title=author or "Unknown author"))
    else:
        for records in groups.values():
            console.print(_book_table(records))

    total = sum(len(records) for records in groups.values())
    console.print(f"\n[dim]{total} book(s)[/dim]")
