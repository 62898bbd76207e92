# ABOUTME: The `audioshelf search` command for free-text search of the library.
# ABOUTME: Matches the query as a case-insensitive substring of title or author.

from pathlib import Path

import click
from rich.console import Console

from audioshelf.cli.library import load_browser, render_book_table
from audioshelf.cli.options import desc_option, library_option, resolve_sort, sort_option
from audioshelf.core.filters import FilterMode

console = Console()


@click.command("search")
@click.argument("query")
@library_option
@sort_option
@desc_option
def search(
    query: str, library_path: Path | None, sort_column: str | None, descending: bool
) -> None:
    """Search the library by title or author."""
    browser, result = load_browser(library_path, console)

    browser.set_filter(FilterMode.SEARCH, text=query)
    sort = resolve_sort(sort_column, descending)
    if sort is not None:
        browser.set_sort(*sort)

    view = browser.current_view()
    if not view:
        console.print("[yellow]No results found.[/yellow]")
        return

    render_book_table(console, view, len(browser.books), result)
