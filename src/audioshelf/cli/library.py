# ABOUTME: Shared helpers for CLI commands: loading the library and rendering book lists.
# ABOUTME: Turns load failures into user-facing messages and striped Rich tables.

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from audioshelf.catalog.types import AudioBook
from audioshelf.core.browser import LibraryBrowser
from audioshelf.formats.ale_csv import (
    DEFAULT_LIBRARY_FILENAME,
    DEFAULT_LIBRARY_PATH,
    IngestResult,
    SourceUnavailableError,
)

STRIPE_STYLES = ("", "on grey15")


def load_browser(
    library_path: Path | None, console: Console
) -> tuple[LibraryBrowser, IngestResult]:
    """Load the library into a browser, exiting with status 1 if the file is unavailable."""
    browser = LibraryBrowser()
    try:
        result = browser.load(library_path or DEFAULT_LIBRARY_PATH)
    except SourceUnavailableError as exc:
        console.print(f"[red]{exc}[/red]")
        console.print(
            f"[dim]Export your library as {DEFAULT_LIBRARY_FILENAME} "
            "or pass --library.[/dim]"
        )
        raise SystemExit(1) from exc
    return browser, result


def _series_display(book: AudioBook) -> str:
    if not book.has_series:
        return ""
    if book.book_number:
        return f"{book.series} #{book.book_number}"
    return book.series


def render_book_table(
    console: Console, books: list[AudioBook], total: int, result: IngestResult
) -> None:
    """Print the view as a table striped by each book's group_stripe."""
    table = Table()
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Narrator")
    table.add_column("Series")
    table.add_column("Rating", justify="right")
    table.add_column("Progress")

    for book in books:
        table.add_row(
            str(book.book_id),
            book.title,
            book.author or "[dim]unknown[/dim]",
            book.narrator,
            _series_display(book),
            book.rating,
            book.progress,
            style=STRIPE_STYLES[book.group_stripe],
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} of {total} book(s)[/dim]")
    report_skipped(console, result)


def report_skipped(console: Console, result: IngestResult) -> None:
    if result.skipped:
        console.print(f"[yellow]{result.skipped} line(s) skipped[/yellow]")


def echo_books_json(books: list[AudioBook]) -> None:
    """Print the view as a JSON array, in view order."""
    data = [
        {
            "id": book.book_id,
            "title": book.title,
            "author": book.author,
            "narrator": book.narrator,
            "series": book.series,
            "book_number": book.book_number,
            "rating": book.rating,
            "ratings": book.ratings,
            "progress": book.progress,
            "group_stripe": book.group_stripe,
        }
        for book in books
    ]
    click.echo(json.dumps(data, indent=2))
