# ABOUTME: Shared Click options for audioshelf CLI commands.
# ABOUTME: Provides reusable decorators for the library path and sort flags.

from pathlib import Path

import click

from audioshelf.core.sorting import SortColumn, SortDirection
from audioshelf.formats.ale_csv import DEFAULT_LIBRARY_PATH

library_option = click.option(
    "--library",
    "library_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="AUDIOSHELF_LIBRARY",
    help=f"Path to the ALE spreadsheet export (default: {DEFAULT_LIBRARY_PATH})",
)

sort_option = click.option(
    "--sort",
    "sort_column",
    type=click.Choice([column.value for column in SortColumn], case_sensitive=False),
    default=None,
    help="Column to sort by.",
)

desc_option = click.option(
    "--desc",
    "descending",
    is_flag=True,
    default=False,
    help="Sort in descending order.",
)


def resolve_sort(
    sort_column: str | None, descending: bool
) -> tuple[SortColumn, SortDirection] | None:
    """Turn the --sort/--desc flag values into a column and direction, if sorting."""
    if sort_column is None:
        return None
    direction = SortDirection.DESCENDING if descending else SortDirection.ASCENDING
    return SortColumn(sort_column.lower()), direction
