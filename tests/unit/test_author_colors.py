# ABOUTME: Unit tests for per-author accent colours.
# ABOUTME: Colours must be stable across runs and come from the palette.

from audioshelf.cli.colors import AUTHOR_PALETTE, DEFAULT_COLOR, author_color


class TestAuthorColor:
    def test_blank_author_gets_default(self) -> None:
        assert author_color("") == DEFAULT_COLOR
        assert author_color("   ") == DEFAULT_COLOR

    def test_color_from_palette(self) -> None:
        assert author_color("Frank Herbert") in AUTHOR_PALETTE

    def test_stable(self) -> None:
        assert author_color("Jane Austen") == author_color("Jane Austen")

    def test_palette_is_hex(self) -> None:
        assert all(c.startswith("#") and len(c) == 7 for c in AUTHOR_PALETTE)
