# ABOUTME: Core data structures for audiobook records loaded from an ALE spreadsheet.
# ABOUTME: AudioBook carries display strings plus derived numeric/sort keys computed once.

import math
import re
import sys
from dataclasses import dataclass, field
from enum import Enum

# Unparsable or blank numeric columns sort after every real value.
NUMBER_SENTINEL = sys.float_info.max

# Blank series sort after any real series name under codepoint comparison.
SERIES_SENTINEL = chr(sys.maxunicode) * 3


class ProgressCategory(Enum):
    """Listening progress categories offered by the progress filter."""

    ALL = "All Progress"
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    FINISHED = "Finished"

    @classmethod
    def from_label(cls, label: str) -> "ProgressCategory":
        """Look up a category by its label or enum name, case-insensitively.

        Raises:
            ValueError: If no category matches.
        """
        wanted = label.strip().casefold().replace("_", " ").replace("-", " ")
        for category in cls:
            if wanted in (category.value.casefold(), category.name.casefold().replace("_", " ")):
                return category
        raise ValueError(f"Unknown progress category: {label!r}")


# Ordinal used when sorting by progress; anything unrecognised sorts last.
_PROGRESS_ORDER = {
    ProgressCategory.NOT_STARTED.value.casefold(): 0,
    ProgressCategory.IN_PROGRESS.value.casefold(): 1,
    ProgressCategory.FINISHED.value.casefold(): 2,
}
_PROGRESS_UNKNOWN = 3

# Plain decimal or exponent notation, optionally with thousands separators.
_NUMBER_RE = re.compile(r"[+-]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_sort_number(text: str) -> float:
    """Parse a numeric column for sorting, or return NUMBER_SENTINEL.

    Accepts surrounding whitespace and thousands separators ("1,234").
    NaN, infinities and Python-only literals such as "1_000" count as
    unparsable.
    """
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return NUMBER_SENTINEL
    value = float(stripped.replace(",", ""))
    return value if math.isfinite(value) else NUMBER_SENTINEL


def progress_ordinal(progress: str) -> int:
    """Map a progress string to its sort ordinal (0-3).

    Time-remaining strings such as "5h 2m left" count as in progress.
    """
    key = progress.strip().casefold()
    if key in _PROGRESS_ORDER:
        return _PROGRESS_ORDER[key]
    if key.endswith(" left"):
        return _PROGRESS_ORDER[ProgressCategory.IN_PROGRESS.value.casefold()]
    return _PROGRESS_UNKNOWN


@dataclass(frozen=True)
class AudioBook:
    """One audiobook entry from the library spreadsheet.

    The record is frozen: display fields are plain strings and the numeric
    sort keys are derived once, in __post_init__, from their source strings.
    group_stripe is presentation metadata written only by the grouping pass
    through set_stripe, and is ignored by equality.
    """

    book_id: int = 0
    title: str = ""
    title_short: str = ""
    series: str = ""
    book_number: str = ""
    blurb: str = ""
    author: str = ""
    narrator: str = ""
    tags: str = ""
    categories: str = ""
    parent_category: str = ""
    child_category: str = ""
    length: str = ""
    progress: str = ""
    release_date: str = ""
    publishers: str = ""
    my_rating: str = ""
    rating: str = ""
    ratings: str = ""
    favorite: str = ""
    format: str = ""
    language: str = ""
    asin: str = ""
    isbn10: str = ""
    isbn13: str = ""
    summary: str = ""
    store_page_url: str = ""
    cover: str = ""
    search_url: str = ""
    subtitle: str = ""
    collection_ids: str = ""

    book_number_value: float = field(init=False)
    rating_sort_value: float = field(init=False)
    ratings_sort_value: float = field(init=False)
    progress_value: int = field(init=False)
    group_stripe: int = field(default=0, init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "book_number_value", parse_sort_number(self.book_number))
        object.__setattr__(self, "rating_sort_value", parse_sort_number(self.rating))
        object.__setattr__(self, "ratings_sort_value", parse_sort_number(self.ratings))
        object.__setattr__(self, "progress_value", progress_ordinal(self.progress))

    def set_stripe(self, stripe: int) -> None:
        """Record the row stripe assigned by the grouping pass."""
        object.__setattr__(self, "group_stripe", stripe)

    @property
    def series_sort_key(self) -> str:
        """Series name, or SERIES_SENTINEL when the book is not in a series."""
        return self.series if self.series.strip() else SERIES_SENTINEL

    @property
    def has_series(self) -> bool:
        """Whether the book belongs to a named series."""
        return bool(self.series.strip())
