# ABOUTME: The `bookshelf authors` command for listing distinct authors.
# ABOUTME: Prints each author once, alphabetically.

from pathlib import Path

import click
from rich.console import Console

from bookshelf.cli.options import db_option, open_gateway
from bookshelf.errors import StorageError

console = Console()


@click.command("authors")
@db_option
def authors(db_path: Path | None) -> None:
    """List every author in the catalog."""
    with open_gateway(db_path, console) as gateway:
        try:
            names = gateway.list_distinct_authors()
        except StorageError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    if not names:
        console.print("[yellow]No authors in the catalog.[/yellow]")
        return

    for name in names:
        console.print(name)
