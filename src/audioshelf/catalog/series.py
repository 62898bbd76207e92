# ABOUTME: Series name cleanup for ALE spreadsheet rows.
# ABOUTME: Strips the embedded "(book N)" ordinal marker from series names.

import re

# Matches an ordinal marker like " (Book 3)" anywhere in the series text.
_BOOK_MARKER_RE = re.compile(r"\s*\(book\s+\d+\)", re.IGNORECASE)


def parse_series_info(series_text: str, book_number_text: str) -> tuple[str, str]:
    """Split raw series/book-number columns into a clean series name and book number.

    The "(book N)" marker is a display artifact of the export; the number inside
    it is discarded. The book number always comes from its own column.

    Returns:
        (series_name, book_number), both trimmed. Series is "" when blank.
    """
    book_number = book_number_text.strip()

    if not series_text.strip():
        return "", book_number

    if _BOOK_MARKER_RE.search(series_text):
        return _BOOK_MARKER_RE.sub("", series_text).strip(), book_number

    return series_text.strip(), book_number
