# ABOUTME: Integration tests for loading a spreadsheet file and browsing it end to end.
# ABOUTME: Exercises read -> filter -> sort -> stripe against a generated library file.

from pathlib import Path

import pytest

from audioshelf.catalog.types import NUMBER_SENTINEL, ProgressCategory
from audioshelf.core.browser import LibraryBrowser
from audioshelf.core.filters import FilterMode
from audioshelf.core.sorting import SortColumn, SortDirection
from tests.fixtures.ale_lines import HEADER, make_line


@pytest.fixture
def mixed_library(tmp_path: Path) -> Path:
    """A library with series gaps, blank ratings, and a few malformed lines."""
    rows = [
        make_line("10", title="The Way of Kings", author="Sanderson, Brandon",
                  series="The Stormlight Archive (Book 1)", book_number="1",
                  rating="4.8", ratings="52,000", narrator="Kramer, Michael",
                  progress="Finished"),
        make_line("11", title="Words of Radiance", author="Sanderson, Brandon",
                  series="The Stormlight Archive (Book 2)", book_number="2",
                  rating="4.9", ratings="40,000", narrator="Kramer, Michael",
                  progress="In Progress"),
        make_line("12", title="Skyward", author="Sanderson, Brandon",
                  series="", book_number="", rating="", ratings="",
                  narrator="Suzy Jackson", progress="Not Started"),
        "13,truncated,row",
        make_line("14", title="Project Hail Mary", author="Weir, Andy",
                  rating="4.7", ratings="120", narrator="Ray Porter",
                  progress="Finished"),
        make_line("15", title="Artemis", author="Weir, Andy",
                  rating="", ratings="", narrator="Rosario Dawson"),
        "",
    ]
    path = tmp_path / "ALE-spreadsheet-library-v1.csv"
    path.write_text("\n".join([HEADER, *rows]), encoding="utf-8")
    return path


@pytest.fixture
def browser(mixed_library: Path) -> LibraryBrowser:
    browser = LibraryBrowser()
    browser.load(mixed_library)
    return browser


def _titles(browser: LibraryBrowser) -> list[str]:
    return [book.title for book in browser.current_view()]


class TestLoading:
    def test_counts(self, mixed_library: Path) -> None:
        browser = LibraryBrowser()
        result = browser.load(mixed_library)
        assert result.added == 5
        assert result.skipped == 1
        assert result.error_details[0][0] == 5

    def test_series_markers_stripped(self, browser: LibraryBrowser) -> None:
        book = browser.get_by_id(1)
        assert book.author == "Sanderson, Brandon"
        assert book.narrator == "Kramer, Michael"
        assert book.series == "The Stormlight Archive"
        assert book.book_number_value == 1.0
        assert book.ratings_sort_value == 52000.0

    def test_blank_numbers_use_sentinel(self, browser: LibraryBrowser) -> None:
        skyward = browser.get_by_id(3)
        assert skyward.book_number_value == NUMBER_SENTINEL
        assert skyward.rating_sort_value == NUMBER_SENTINEL


class TestBrowsing:
    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_blank_series_last(self, browser: LibraryBrowser, direction: SortDirection) -> None:
        browser.set_sort(SortColumn.SERIES, direction)
        series = [book.series for book in browser.current_view()]
        first_blank = series.index("")
        assert all(not s for s in series[first_blank:])
        assert all(series[:first_blank])

    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_unrated_last(self, browser: LibraryBrowser, direction: SortDirection) -> None:
        browser.set_sort(SortColumn.RATING, direction)
        assert _titles(browser)[-2:] == ["Skyward", "Artemis"]

    def test_rating_descending(self, browser: LibraryBrowser) -> None:
        browser.set_sort(SortColumn.RATING)
        browser.set_sort(SortColumn.RATING)
        assert _titles(browser)[:3] == ["Words of Radiance", "The Way of Kings", "Project Hail Mary"]

    def test_same_series_then_sort_by_book_number(self, browser: LibraryBrowser) -> None:
        browser.set_selection(2)
        browser.set_filter(FilterMode.SAME_SERIES)
        browser.set_sort(SortColumn.BOOK_NUMBER, SortDirection.DESCENDING)
        assert _titles(browser) == ["Words of Radiance", "The Way of Kings"]

    def test_same_narrator_with_comma(self, browser: LibraryBrowser) -> None:
        browser.set_selection(1)
        browser.set_filter(FilterMode.SAME_NARRATOR)
        assert _titles(browser) == ["The Way of Kings", "Words of Radiance"]

    def test_progress_filter_with_author_sort(self, browser: LibraryBrowser) -> None:
        browser.set_sort(SortColumn.AUTHOR)
        browser.set_filter(FilterMode.PROGRESS, progress=ProgressCategory.FINISHED)
        view = browser.current_view()
        assert [b.title for b in view] == ["The Way of Kings", "Project Hail Mary"]
        assert [b.group_stripe for b in view] == [0, 1]

    def test_author_stripes_over_whole_library(self, browser: LibraryBrowser) -> None:
        browser.set_sort(SortColumn.AUTHOR)
        view = browser.current_view()
        assert [b.author for b in view] == ["Sanderson, Brandon"] * 3 + ["Weir, Andy"] * 2
        assert [b.group_stripe for b in view] == [0, 0, 0, 1, 1]
        assert [b.title for b in view][:3] == ["The Way of Kings", "Words of Radiance", "Skyward"]

    def test_author_then_title_resets_direction(self, browser: LibraryBrowser) -> None:
        browser.set_sort(SortColumn.AUTHOR)
        browser.set_sort(SortColumn.AUTHOR)
        browser.set_sort(SortColumn.TITLE)
        assert browser.sort_state.direction is SortDirection.ASCENDING
        assert _titles(browser)[0] == "Artemis"
