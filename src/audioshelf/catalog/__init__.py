# ABOUTME: Catalog package for audiobook records and their normalization helpers.
# ABOUTME: Exports the AudioBook dataclass used throughout audioshelf.

from audioshelf.catalog.series import parse_series_info
from audioshelf.catalog.types import (
    NUMBER_SENTINEL,
    SERIES_SENTINEL,
    AudioBook,
    ProgressCategory,
)

__all__ = [
    "NUMBER_SENTINEL",
    "SERIES_SENTINEL",
    "AudioBook",
    "ProgressCategory",
    "parse_series_info",
]
