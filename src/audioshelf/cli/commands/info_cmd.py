# ABOUTME: The `audioshelf info` command for displaying every field of one book.
# ABOUTME: Blank fields show a placeholder; the panel is tinted with the author's colour.

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from audioshelf.catalog.types import AudioBook
from audioshelf.cli.colors import author_color
from audioshelf.cli.library import load_browser
from audioshelf.cli.options import library_option

console = Console()

PLACEHOLDER = "(Not specified)"
NO_SERIES_PLACEHOLDER = "(Not part of a series)"

# (label, attribute) in display order.
_DETAIL_FIELDS: tuple[tuple[str, str], ...] = (
    ("Title", "title"),
    ("Short Title", "title_short"),
    ("Author", "author"),
    ("Narrator", "narrator"),
    ("Series", "series"),
    ("Book Number", "book_number"),
    ("Subtitle", "subtitle"),
    ("Blurb", "blurb"),
    ("Length", "length"),
    ("Progress", "progress"),
    ("Release Date", "release_date"),
    ("Publishers", "publishers"),
    ("Rating", "rating"),
    ("Ratings", "ratings"),
    ("My Rating", "my_rating"),
    ("Favorite", "favorite"),
    ("Categories", "categories"),
    ("Parent Category", "parent_category"),
    ("Child Category", "child_category"),
    ("Tags", "tags"),
    ("Format", "format"),
    ("Language", "language"),
    ("ASIN", "asin"),
    ("ISBN-10", "isbn10"),
    ("ISBN-13", "isbn13"),
    ("Store Page", "store_page_url"),
    ("Goodreads", "search_url"),
    ("Cover", "cover"),
    ("Collections", "collection_ids"),
)


def display_value(book: AudioBook, attr: str) -> str:
    """Field value for display, with a placeholder when blank."""
    value = getattr(book, attr)
    if value.strip():
        return value
    return NO_SERIES_PLACEHOLDER if attr == "series" else PLACEHOLDER


@click.command("info")
@click.argument("book_id", type=int)
@library_option
def info(book_id: int, library_path: Path | None) -> None:
    """Show detailed metadata for a book by ID."""
    browser, _ = load_browser(library_path, console)

    book = browser.get_by_id(book_id)
    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=16)
    table.add_column("Value")

    table.add_row("ID", str(book.book_id))
    for label, attr in _DETAIL_FIELDS:
        table.add_row(label, display_value(book, attr))

    console.print(Panel(table, border_style=author_color(book.author)))
