# ABOUTME: Shared Click options and helpers for Bookshelf CLI commands.
# ABOUTME: Provides the --db flag and opens the gateway it selects.

from pathlib import Path

import click
from rich.console import Console

from bookshelf.bootstrap import open_default_gateway
from bookshelf.db.gateway import BookGateway
from bookshelf.errors import ConfigError, ConnectivityError

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to catalog database (default: chosen from the config file)",
)


def open_gateway(db_path: Path | None, console: Console) -> BookGateway:
    """Open the gateway for --db, or the configured default when it is absent.

    Prints the failure and exits with status 1 if no database can be opened.
    """
    try:
        if db_path is not None:
            return BookGateway(db_path)
        return open_default_gateway()
    except (ConfigError, ConnectivityError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
