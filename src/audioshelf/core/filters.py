# ABOUTME: Mutually-exclusive filter modes for browsing the audiobook library.
# ABOUTME: FilterState holds exactly one active predicate; activation validates preconditions.

from dataclasses import dataclass
from enum import Enum

from audioshelf.catalog.types import AudioBook, ProgressCategory


class FilterMode(Enum):
    """The filter selectors; at most one is active at a time."""

    NONE = "none"
    SAME_AUTHOR = "same-author"
    SAME_SERIES = "same-series"
    SAME_NARRATOR = "same-narrator"
    PROGRESS = "progress"
    SEARCH = "search"


class FilterPreconditionError(ValueError):
    """Raised when a filter cannot be activated for the current selection."""


@dataclass(frozen=True)
class FilterState:
    """The active filter and its single parameter.

    For the same-* modes, value is the anchor field taken from the selected
    book at activation time. For PROGRESS it is the category label, for
    SEARCH the search text, and for NONE it is empty.
    """

    mode: FilterMode = FilterMode.NONE
    value: str = ""

    @property
    def is_active(self) -> bool:
        return self.mode is not FilterMode.NONE


NO_FILTER = FilterState()

# Mode -> (AudioBook attribute, human-readable field name)
_ANCHOR_FIELDS = {
    FilterMode.SAME_AUTHOR: ("author", "author"),
    FilterMode.SAME_SERIES: ("series", "series"),
    FilterMode.SAME_NARRATOR: ("narrator", "narrator"),
}


def activate_filter(
    mode: FilterMode,
    *,
    selection: AudioBook | None = None,
    progress: ProgressCategory = ProgressCategory.ALL,
    text: str = "",
) -> FilterState:
    """Build the FilterState for activating a single filter mode.

    Activating PROGRESS with ProgressCategory.ALL, or SEARCH with blank text,
    is the same as turning filtering off.

    Raises:
        FilterPreconditionError: If a same-author/series/narrator filter is
            requested without a selected book, or the selected book has a
            blank series/narrator.
    """
    if mode in _ANCHOR_FIELDS:
        attr, label = _ANCHOR_FIELDS[mode]
        if selection is None:
            raise FilterPreconditionError(f"Please select a book first to filter by {label}.")
        anchor = getattr(selection, attr).strip()
        if mode is not FilterMode.SAME_AUTHOR and not anchor:
            raise FilterPreconditionError(
                f"The selected book has no {label} to filter by."
            )
        return FilterState(mode=mode, value=anchor)

    if mode is FilterMode.PROGRESS:
        if progress is ProgressCategory.ALL:
            return NO_FILTER
        return FilterState(mode=mode, value=progress.value)

    if mode is FilterMode.SEARCH:
        if not text.strip():
            return NO_FILTER
        return FilterState(mode=mode, value=text)

    return NO_FILTER


def matches(book: AudioBook, state: FilterState) -> bool:
    """Check whether a book passes the active filter."""
    if state.mode in _ANCHOR_FIELDS:
        attr, _ = _ANCHOR_FIELDS[state.mode]
        return getattr(book, attr).strip().casefold() == state.value.casefold()

    if state.mode is FilterMode.PROGRESS:
        return book.progress.casefold() == state.value.casefold()

    if state.mode is FilterMode.SEARCH:
        needle = state.value.casefold()
        return needle in book.title.casefold() or needle in book.author.casefold()

    return True


def apply_filter(books: list[AudioBook], state: FilterState) -> list[AudioBook]:
    """Return the books passing the filter, preserving their original order."""
    if not state.is_active:
        return list(books)
    return [book for book in books if matches(book, state)]
