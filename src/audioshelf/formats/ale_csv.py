# ABOUTME: Reader for the ALE (Audible Library Extractor) spreadsheet CSV export.
# ABOUTME: Quote-aware line splitting and fixed column mapping into AudioBook records.

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from audioshelf.catalog.series import parse_series_info
from audioshelf.catalog.types import AudioBook

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_FILENAME = "ALE-spreadsheet-library-v1.csv"
DEFAULT_LIBRARY_PATH = Path.home() / ".audioshelf" / DEFAULT_LIBRARY_FILENAME

# Field index -> AudioBook attribute. Index 0 is the export's row id and the
# unlisted indexes hold columns we do not display.
COLUMN_MAP: dict[int, str] = {
    1: "title",
    2: "title_short",
    5: "blurb",
    6: "author",
    7: "narrator",
    8: "tags",
    9: "categories",
    10: "parent_category",
    11: "child_category",
    12: "length",
    13: "progress",
    14: "release_date",
    15: "publishers",
    16: "my_rating",
    17: "rating",
    18: "ratings",
    19: "favorite",
    20: "format",
    21: "language",
    29: "asin",
    30: "isbn10",
    31: "isbn13",
    32: "summary",
    34: "store_page_url",
    37: "cover",
    38: "search_url",
    39: "subtitle",
    40: "collection_ids",
}
SERIES_INDEX = 3
BOOK_NUMBER_INDEX = 4

MIN_FIELD_COUNT = max(*COLUMN_MAP, SERIES_INDEX, BOOK_NUMBER_INDEX) + 1


class LineParseError(Exception):
    """Raised when a spreadsheet line cannot be turned into a record."""


class SourceUnavailableError(Exception):
    """Raised when the library file is missing or cannot be read."""


@dataclass
class IngestResult:
    """Summary of an ingestion pass."""

    books: list[AudioBook] = field(default_factory=list)
    skipped: int = 0
    error_details: list[tuple[int, str]] = field(default_factory=list)

    @property
    def added(self) -> int:
        """Number of records produced."""
        return len(self.books)


def split_line(line: str) -> list[str]:
    """Split one line on commas that sit outside double-quoted spans.

    Quote characters only toggle the quoted span and are dropped. Doubled
    quotes are not unescaped: '""' toggles twice and leaves nothing behind.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_line(line: str, book_id: int = 0) -> AudioBook:
    """Parse one data line into an AudioBook.

    Args:
        line: Raw line text, without the trailing newline.
        book_id: Identity to give the record.

    Raises:
        LineParseError: If the line has fewer than MIN_FIELD_COUNT fields.
    """
    fields = split_line(line.rstrip("\r\n"))
    if len(fields) < MIN_FIELD_COUNT:
        raise LineParseError(
            f"Expected at least {MIN_FIELD_COUNT} fields, got {len(fields)}"
        )

    series, book_number = parse_series_info(
        fields[SERIES_INDEX].strip(), fields[BOOK_NUMBER_INDEX].strip()
    )
    values = {name: fields[index].strip() for index, name in COLUMN_MAP.items()}

    return AudioBook(book_id=book_id, series=series, book_number=book_number, **values)


def parse_lines(lines: Iterable[str], *, skip_header: bool = True) -> IngestResult:
    """Parse a batch of spreadsheet lines, skipping the ones that fail.

    A failing line never aborts the batch: it is logged, counted, and its
    1-based line number recorded in error_details. Blank lines are ignored.
    """
    result = IngestResult()

    for line_number, line in enumerate(lines, start=1):
        if skip_header and line_number == 1:
            continue
        if not line.strip():
            continue
        try:
            book = parse_line(line, book_id=result.added + 1)
        except Exception as exc:
            logger.warning("Skipping line %d: %s", line_number, exc)
            result.skipped += 1
            result.error_details.append((line_number, str(exc)))
            continue
        result.books.append(book)

    logger.debug("Parsed %d record(s), skipped %d line(s)", result.added, result.skipped)
    return result


def read_library(path: Path | None = None) -> IngestResult:
    """Read and parse an ALE spreadsheet file.

    Args:
        path: Path to the CSV export. Defaults to DEFAULT_LIBRARY_PATH.

    Returns:
        IngestResult with the parsed books and per-line skip details.

    Raises:
        SourceUnavailableError: If the file does not exist or cannot be read.
    """
    library_path = path or DEFAULT_LIBRARY_PATH
    if not library_path.is_file():
        raise SourceUnavailableError(f"Library file not found: {library_path}")

    try:
        with library_path.open(encoding="utf-8-sig", errors="replace") as handle:
            return parse_lines(handle)
    except OSError as exc:
        raise SourceUnavailableError(f"Failed to read library file: {library_path}: {exc}") from exc
