# ABOUTME: CLI package for Bookshelf, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from bookshelf.cli.commands import add_cmd, authors_cmd, ls_cmd, set_cmd


@click.group()
@click.version_option(package_name="bookshelf")
@click.option("-v", "--verbose", is_flag=True, help="Log database activity to stderr.")
def cli(verbose: bool) -> None:
    """Bookshelf - a personal book catalog."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(add_cmd.add)
cli.add_command(authors_cmd.authors)
cli.add_command(ls_cmd.ls)
cli.add_command(set_cmd.set_book)
