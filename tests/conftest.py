# ABOUTME: Shared pytest fixtures for audioshelf tests.
# ABOUTME: Provides sample ALE spreadsheet lines, library files, and loaded books.

from pathlib import Path

import pytest

from audioshelf.catalog.types import AudioBook
from audioshelf.formats.ale_csv import parse_lines
from tests.fixtures.ale_lines import sample_library_lines


@pytest.fixture
def sample_lines() -> list[str]:
    """Header plus the five sample rows."""
    return sample_library_lines()


@pytest.fixture
def sample_books(sample_lines: list[str]) -> list[AudioBook]:
    """The five sample rows parsed into AudioBooks (ids 1..5)."""
    return parse_lines(sample_lines).books


@pytest.fixture
def library_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Write the sample library, plus one short malformed line, to a CSV file."""
    path = tmp_path / "ALE-spreadsheet-library-v1.csv"
    lines = [*sample_lines, "99,too,short"]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
