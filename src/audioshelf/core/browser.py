# ABOUTME: Library browser orchestrating filter, sort, and stripe passes over loaded books.
# ABOUTME: Owns selection and filter/sort state; every state change triggers one rebuild.

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from audioshelf.catalog.types import AudioBook, ProgressCategory
from audioshelf.core.filters import (
    NO_FILTER,
    FilterMode,
    FilterPreconditionError,
    FilterState,
    activate_filter,
    apply_filter,
)
from audioshelf.core.grouping import annotate_stripes
from audioshelf.core.sorting import (
    SortColumn,
    SortDirection,
    SortState,
    next_sort_state,
    sort_books,
)
from audioshelf.formats.ale_csv import IngestResult, parse_lines, read_library

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Outcome of a filter request: the resulting view, or the reason it was refused."""

    view: list[AudioBook] = field(default_factory=list)
    error: FilterPreconditionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LibraryBrowser:
    """In-memory browsing session over a loaded audiobook library.

    Each public state-changing call runs exactly one rebuild pass:
    filter -> sort (last used column and direction) -> stripe annotation.
    Resets the browser performs on its own state happen under a latch so
    they do not trigger nested rebuilds.
    """

    def __init__(self, books: Iterable[AudioBook] | None = None) -> None:
        self._books: list[AudioBook] = list(books or [])
        self._filter: FilterState = NO_FILTER
        self._sort: SortState | None = None
        self._selection: AudioBook | None = None
        self._view: list[AudioBook] = []
        self._updating = False
        self.rebuild()

    @property
    def books(self) -> list[AudioBook]:
        """All loaded books in file order."""
        return list(self._books)

    @property
    def selection(self) -> AudioBook | None:
        return self._selection

    @property
    def filter_state(self) -> FilterState:
        return self._filter

    @property
    def sort_state(self) -> SortState | None:
        return self._sort

    def current_view(self) -> list[AudioBook]:
        """The filtered, sorted, and striped books from the last rebuild."""
        return list(self._view)

    def get_by_id(self, book_id: int) -> AudioBook | None:
        """Look up a loaded book by id, regardless of the active filter."""
        for book in self._books:
            if book.book_id == book_id:
                return book
        return None

    @contextmanager
    def _suppress_rebuilds(self) -> Iterator[None]:
        self._updating = True
        try:
            yield
        finally:
            self._updating = False

    def rebuild(self) -> list[AudioBook]:
        """Recompute the view from the full book set and the current state.

        Drops the selection if the selected book is no longer visible.
        No-op while the browser is resetting its own state.
        """
        if self._updating:
            return self.current_view()

        view = apply_filter(self._books, self._filter)
        column = self._sort.column if self._sort is not None else None
        if self._sort is not None:
            view = sort_books(view, self._sort.column, self._sort.direction)
        annotate_stripes(view, column)
        self._view = view

        if self._selection is not None:
            visible = {book.book_id for book in view}
            if self._selection.book_id not in visible:
                logger.debug("Selection %d filtered out, clearing", self._selection.book_id)
                self._selection = None

        logger.debug(
            "Rebuilt view: %d of %d book(s), filter=%s, sort=%s",
            len(view), len(self._books), self._filter.mode.value,
            f"{self._sort.column.value}/{self._sort.direction.value}" if self._sort else "none",
        )
        return self.current_view()

    def _replace_books(self, books: list[AudioBook]) -> None:
        with self._suppress_rebuilds():
            self._books = books
            self._selection = None
            self.clear_filters()
        self.rebuild()

    def ingest(self, lines: Iterable[str]) -> IngestResult:
        """Parse raw spreadsheet lines (header first) and replace the loaded books."""
        result = parse_lines(lines)
        self._replace_books(result.books)
        return result

    def load(self, path: Path | None = None) -> IngestResult:
        """Read a spreadsheet file and replace the loaded books.

        Raises:
            SourceUnavailableError: If the file is missing or unreadable.
        """
        result = read_library(path)
        self._replace_books(result.books)
        return result

    def set_selection(self, book_id: int | None) -> bool:
        """Select a visible book by id, or clear the selection with None.

        Returns:
            True if a book is selected afterwards; unknown or filtered-out
            ids clear the selection.
        """
        if book_id is None:
            self._selection = None
            return False

        for book in self._view:
            if book.book_id == book_id:
                self._selection = book
                return True

        self._selection = None
        return False

    def clear_filters(self) -> list[AudioBook]:
        """Turn every filter off."""
        self._filter = NO_FILTER
        return self.rebuild()

    def set_filter(
        self,
        mode: FilterMode,
        *,
        progress: ProgressCategory = ProgressCategory.ALL,
        text: str = "",
    ) -> FilterResult:
        """Activate one filter mode, turning every other filter off.

        Progress and search filters also clear the selection. When a
        precondition fails, the filter state and view are left unchanged and
        the error is returned in the result.
        """
        if self._updating:
            return FilterResult(view=self.current_view())

        try:
            state = activate_filter(mode, selection=self._selection, progress=progress, text=text)
        except FilterPreconditionError as exc:
            logger.info("Filter %s refused: %s", mode.value, exc)
            return FilterResult(view=self.current_view(), error=exc)

        with self._suppress_rebuilds():
            self.clear_filters()
            if state.mode in (FilterMode.PROGRESS, FilterMode.SEARCH):
                self.set_selection(None)
            self._filter = state

        return FilterResult(view=self.rebuild())

    def set_sort(
        self, column: SortColumn, direction: SortDirection | None = None
    ) -> list[AudioBook]:
        """Sort the view by column.

        Without an explicit direction, re-sorting the last column flips its
        direction and any other column starts ascending.
        """
        if direction is None:
            self._sort = next_sort_state(self._sort, column)
        else:
            self._sort = SortState(column, direction)
        return self.rebuild()
