# ABOUTME: Unit tests for filter activation and predicates.
# ABOUTME: Validates preconditions, mutual exclusivity, and stable filtering.

import pytest

from audioshelf.catalog.types import AudioBook, ProgressCategory
from audioshelf.core.filters import (
    NO_FILTER,
    FilterMode,
    FilterPreconditionError,
    FilterState,
    activate_filter,
    apply_filter,
    matches,
)


def _titles(books: list[AudioBook]) -> list[str]:
    return [book.title for book in books]


class TestActivateFilter:
    """activate_filter should validate preconditions and build a single-mode state."""

    def test_same_author_requires_selection(self) -> None:
        with pytest.raises(FilterPreconditionError, match="select a book first"):
            activate_filter(FilterMode.SAME_AUTHOR)

    def test_same_author_captures_trimmed_author(self) -> None:
        state = activate_filter(FilterMode.SAME_AUTHOR, selection=AudioBook(author=" Herbert "))
        assert state == FilterState(FilterMode.SAME_AUTHOR, "Herbert")

    def test_same_author_allows_blank_author(self) -> None:
        state = activate_filter(FilterMode.SAME_AUTHOR, selection=AudioBook(author=""))
        assert state.mode is FilterMode.SAME_AUTHOR

    def test_same_series_requires_selection(self) -> None:
        with pytest.raises(FilterPreconditionError):
            activate_filter(FilterMode.SAME_SERIES)

    def test_same_series_requires_series(self) -> None:
        with pytest.raises(FilterPreconditionError, match="no series"):
            activate_filter(FilterMode.SAME_SERIES, selection=AudioBook(series="  "))

    def test_same_narrator_requires_narrator(self) -> None:
        with pytest.raises(FilterPreconditionError, match="no narrator"):
            activate_filter(FilterMode.SAME_NARRATOR, selection=AudioBook(narrator=""))

    def test_precondition_error_is_value_error(self) -> None:
        assert issubclass(FilterPreconditionError, ValueError)

    def test_progress_all_is_no_filter(self) -> None:
        assert activate_filter(FilterMode.PROGRESS, progress=ProgressCategory.ALL) == NO_FILTER

    def test_progress_category(self) -> None:
        state = activate_filter(FilterMode.PROGRESS, progress=ProgressCategory.FINISHED)
        assert state == FilterState(FilterMode.PROGRESS, "Finished")

    def test_blank_search_is_no_filter(self) -> None:
        assert activate_filter(FilterMode.SEARCH, text="   ") == NO_FILTER

    def test_search_keeps_text(self) -> None:
        assert activate_filter(FilterMode.SEARCH, text="dune").value == "dune"

    def test_none_mode(self) -> None:
        assert activate_filter(FilterMode.NONE) == NO_FILTER
        assert NO_FILTER.is_active is False


class TestMatches:
    """matches should apply exactly the active predicate."""

    def test_same_author_case_and_whitespace_insensitive(self) -> None:
        state = FilterState(FilterMode.SAME_AUTHOR, "Sanderson, Brandon")
        assert matches(AudioBook(author="  sanderson, BRANDON "), state) is True
        assert matches(AudioBook(author="Sanderson"), state) is False

    def test_same_series_exact(self) -> None:
        state = FilterState(FilterMode.SAME_SERIES, "Dune")
        assert matches(AudioBook(series="dune"), state) is True
        assert matches(AudioBook(series="Dune Messiah"), state) is False

    def test_same_narrator(self) -> None:
        state = FilterState(FilterMode.SAME_NARRATOR, "Kramer")
        assert matches(AudioBook(narrator="KRAMER"), state) is True

    def test_progress_exact_case_insensitive(self) -> None:
        state = FilterState(FilterMode.PROGRESS, "Finished")
        assert matches(AudioBook(progress="finished"), state) is True
        assert matches(AudioBook(progress="Not Started"), state) is False

    def test_search_title_or_author_substring(self) -> None:
        state = FilterState(FilterMode.SEARCH, "SAND")
        assert matches(AudioBook(title="Sandworms"), state) is True
        assert matches(AudioBook(author="Brandon Sanderson"), state) is True
        assert matches(AudioBook(narrator="Sandy"), state) is False

    def test_no_filter_matches_everything(self) -> None:
        assert matches(AudioBook(), NO_FILTER) is True


class TestApplyFilter:
    """apply_filter should return a stable subsequence."""

    def test_preserves_order(self, sample_books: list[AudioBook]) -> None:
        state = FilterState(FilterMode.PROGRESS, "Finished")
        assert _titles(apply_filter(sample_books, state)) == ["Mistborn", "Emma", "Warbreaker"]

    def test_no_filter_returns_copy(self, sample_books: list[AudioBook]) -> None:
        result = apply_filter(sample_books, NO_FILTER)
        assert result == sample_books
        assert result is not sample_books

    def test_same_author_never_splits_group(self, sample_books: list[AudioBook]) -> None:
        """Case-variant spellings of one author are kept or dropped together."""
        state = activate_filter(FilterMode.SAME_AUTHOR, selection=sample_books[4])
        assert _titles(apply_filter(sample_books, state)) == ["Mistborn", "Elantris", "Warbreaker"]

    def test_idempotent(self, sample_books: list[AudioBook]) -> None:
        state = FilterState(FilterMode.SEARCH, "an")
        once = apply_filter(sample_books, state)
        assert apply_filter(sample_books, state) == once
