# ABOUTME: Column sorting for the audiobook view using compound keys.
# ABOUTME: Each column is a key chain plus an optional empty-last rule; direction is sticky per column.

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any

from audioshelf.catalog.types import AudioBook


class SortColumn(Enum):
    """Sortable columns of the book list."""

    AUTHOR = "author"
    SERIES = "series"
    BOOK_NUMBER = "book-number"
    TITLE = "title"
    NARRATOR = "narrator"
    RATING = "rating"
    RATINGS = "ratings"
    PROGRESS = "progress"


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


class KeyOrder(Enum):
    """How a key in a chain relates to the requested direction."""

    FOLLOW = "follow"
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortKey:
    """One comparison step: how to extract the value and which way it runs."""

    extract: Callable[[AudioBook], Any]
    order: KeyOrder = KeyOrder.FOLLOW


@dataclass(frozen=True)
class ColumnSort:
    """Key chain for a column, with an optional direction-independent empty-last check."""

    keys: tuple[SortKey, ...]
    is_empty: Callable[[AudioBook], bool] | None = None


@dataclass(frozen=True)
class SortState:
    """The last sorted column and the direction it was sorted in."""

    column: SortColumn
    direction: SortDirection = SortDirection.ASCENDING

    def next(self, column: SortColumn) -> "SortState":
        """State after a sort request on column: same column flips, new column starts ascending."""
        if column is self.column:
            return SortState(column, self.direction.flipped())
        return SortState(column, SortDirection.ASCENDING)


def next_sort_state(current: SortState | None, column: SortColumn) -> SortState:
    """Apply the sticky direction rule, starting ascending when nothing was sorted yet."""
    if current is None:
        return SortState(column)
    return current.next(column)


def ordinal_fold(text: str) -> str:
    """Case-fold text one character at a time, keeping per-codepoint ordering.

    Characters whose fold expands to several characters ("ß" -> "ss") are
    kept as they are so each codepoint still compares on its own.
    """
    folded = []
    for char in text:
        lowered = char.casefold()
        folded.append(lowered if len(lowered) == 1 else char)
    return "".join(folded)


def _text(attr: str) -> Callable[[AudioBook], str]:
    """Case-insensitive, codepoint-ordered string key."""

    def extract(book: AudioBook) -> str:
        return ordinal_fold(getattr(book, attr))

    return extract


def _value(attr: str) -> Callable[[AudioBook], Any]:
    def extract(book: AudioBook) -> Any:
        return getattr(book, attr)

    return extract


def _blank(attr: str) -> Callable[[AudioBook], bool]:
    def check(book: AudioBook) -> bool:
        return not getattr(book, attr).strip()

    return check


_AUTHOR = SortKey(_text("author"))
_TITLE = SortKey(_text("title"))
_SERIES_LAST = SortKey(_text("series_sort_key"), KeyOrder.ASCENDING)
_BOOK_NUMBER = SortKey(_value("book_number_value"))

COLUMN_SORTS: dict[SortColumn, ColumnSort] = {
    SortColumn.AUTHOR: ColumnSort(keys=(_AUTHOR, _SERIES_LAST, _BOOK_NUMBER, _TITLE)),
    SortColumn.SERIES: ColumnSort(
        keys=(SortKey(_text("series")), _BOOK_NUMBER, _AUTHOR, _TITLE),
        is_empty=_blank("series"),
    ),
    SortColumn.BOOK_NUMBER: ColumnSort(keys=(_BOOK_NUMBER, _SERIES_LAST, _AUTHOR, _TITLE)),
    SortColumn.TITLE: ColumnSort(keys=(_TITLE, _AUTHOR, _SERIES_LAST)),
    SortColumn.NARRATOR: ColumnSort(keys=(SortKey(_text("narrator")), _AUTHOR, _TITLE)),
    SortColumn.RATING: ColumnSort(
        keys=(
            SortKey(_value("rating_sort_value")),
            SortKey(_value("ratings_sort_value"), KeyOrder.DESCENDING),
            _TITLE,
        ),
        is_empty=_blank("rating"),
    ),
    SortColumn.RATINGS: ColumnSort(
        keys=(
            SortKey(_value("ratings_sort_value")),
            SortKey(_value("rating_sort_value")),
            _TITLE,
        ),
        is_empty=_blank("ratings"),
    ),
    SortColumn.PROGRESS: ColumnSort(keys=(SortKey(_value("progress_value")), _AUTHOR, _TITLE)),
}


def _compare(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _is_descending(order: KeyOrder, direction: SortDirection) -> bool:
    if order is KeyOrder.FOLLOW:
        return direction is SortDirection.DESCENDING
    return order is KeyOrder.DESCENDING


def make_comparator(
    column_sort: ColumnSort, direction: SortDirection
) -> Callable[[AudioBook, AudioBook], int]:
    """Build a cmp-style function for a column's key chain in the given direction.

    The empty-last check runs first and ignores direction. Two empty books
    compare equal without consulting the key chain.
    """
    steps = [(key.extract, _is_descending(key.order, direction)) for key in column_sort.keys]
    is_empty = column_sort.is_empty

    def compare(left: AudioBook, right: AudioBook) -> int:
        if is_empty is not None:
            left_empty, right_empty = is_empty(left), is_empty(right)
            if left_empty or right_empty:
                return _compare(left_empty, right_empty)

        for extract, descending in steps:
            result = _compare(extract(left), extract(right))
            if result:
                return -result if descending else result
        return 0

    return compare


def sort_books(
    books: list[AudioBook],
    column: SortColumn,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[AudioBook]:
    """Return a new list of books ordered by the column's compound key.

    The sort is stable, so books that compare equal keep their input order.
    """
    comparator = make_comparator(COLUMN_SORTS[column], direction)
    return sorted(books, key=cmp_to_key(comparator))
