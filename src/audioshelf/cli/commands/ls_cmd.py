# ABOUTME: The `audioshelf ls` command for listing, filtering, and sorting books.
# ABOUTME: Applies at most one filter, then the requested sort, and prints a striped table.

from pathlib import Path

import click
from rich.console import Console

from audioshelf.catalog.types import ProgressCategory
from audioshelf.cli.library import echo_books_json, load_browser, render_book_table
from audioshelf.cli.options import desc_option, library_option, resolve_sort, sort_option
from audioshelf.core.filters import FilterMode

console = Console()

_PROGRESS_CHOICES = ["all", "not-started", "in-progress", "finished"]


@click.command("ls")
@library_option
@sort_option
@desc_option
@click.option(
    "--same-author",
    "same_author",
    type=int,
    default=None,
    metavar="BOOK_ID",
    help="Show only books by the author of BOOK_ID.",
)
@click.option(
    "--same-series",
    "same_series",
    type=int,
    default=None,
    metavar="BOOK_ID",
    help="Show only books in the series of BOOK_ID.",
)
@click.option(
    "--same-narrator",
    "same_narrator",
    type=int,
    default=None,
    metavar="BOOK_ID",
    help="Show only books read by the narrator of BOOK_ID.",
)
@click.option(
    "--progress",
    "progress",
    type=click.Choice(_PROGRESS_CHOICES, case_sensitive=False),
    default=None,
    help="Show only books with this listening progress.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)
def ls(
    library_path: Path | None,
    sort_column: str | None,
    descending: bool,
    same_author: int | None,
    same_series: int | None,
    same_narrator: int | None,
    progress: str | None,
    json_output: bool,
) -> None:
    """List books in the library, optionally filtered and sorted."""
    anchors = {
        FilterMode.SAME_AUTHOR: same_author,
        FilterMode.SAME_SERIES: same_series,
        FilterMode.SAME_NARRATOR: same_narrator,
    }
    requested = [mode for mode, book_id in anchors.items() if book_id is not None]
    if progress is not None:
        requested.append(FilterMode.PROGRESS)
    if len(requested) > 1:
        raise click.UsageError("Only one filter option may be used at a time.")

    browser, result = load_browser(library_path, console)

    if requested:
        mode = requested[0]
        if mode is FilterMode.PROGRESS:
            outcome = browser.set_filter(mode, progress=ProgressCategory.from_label(progress))
        else:
            book_id = anchors[mode]
            if not browser.set_selection(book_id):
                console.print(f"[red]Book {book_id} not found.[/red]")
                raise SystemExit(1)
            outcome = browser.set_filter(mode)
        if not outcome.ok:
            console.print(f"[red]{outcome.error}[/red]")
            raise SystemExit(1)

    sort = resolve_sort(sort_column, descending)
    if sort is not None:
        browser.set_sort(*sort)

    view = browser.current_view()

    if json_output:
        echo_books_json(view)
        return

    if not browser.books:
        console.print("[yellow]No books in the library.[/yellow]")
        return
    if not view:
        console.print("[yellow]No books match the filter.[/yellow]")
        return

    render_book_table(console, view, len(browser.books), result)
