# ABOUTME: CLI package for audioshelf, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from audioshelf.cli.commands import info_cmd, ls_cmd, search_cmd
from audioshelf.logging_setup import setup_logging


@click.group()
@click.version_option(package_name="audioshelf")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """audioshelf - browse an exported audiobook library from the terminal."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(info_cmd.info)
