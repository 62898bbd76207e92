# ABOUTME: Stable per-author accent colours for the detail view.
# ABOUTME: Hashes the author name into a fixed palette so an author always gets the same colour.

import hashlib

# Pale tints, as hex so Rich can use them for borders and backgrounds.
AUTHOR_PALETTE: tuple[str, ...] = (
    "#fffaf0",  # floral white
    "#f0f8ff",  # alice blue
    "#f5fffa",  # mint cream
    "#fffafa",  # snow
    "#fff8dc",  # cornsilk
    "#fafad2",  # light goldenrod yellow
    "#ffefd5",  # papaya whip
    "#fff5ee",  # seashell
    "#f5f5dc",  # beige
    "#e6e6fa",  # lavender
    "#f0fff0",  # honeydew
    "#f8f8ff",  # ghost white
    "#f0ffff",  # azure
    "#fff0f5",  # lavender blush
    "#f5f5f5",  # white smoke
    "#fffff0",  # ivory
    "#f0e68c",  # khaki
    "#ffe4e1",  # misty rose
    "#ffebcd",  # blanched almond
    "#faebd7",  # antique white
)

DEFAULT_COLOR = "#ffffff"


def author_color(author: str) -> str:
    """Pick the palette colour for an author; blank authors get DEFAULT_COLOR."""
    if not author.strip():
        return DEFAULT_COLOR
    digest = hashlib.sha256(author.encode("utf-8")).digest()
    index = int.from_bytes(digest[:4], "big") % len(AUTHOR_PALETTE)
    return AUTHOR_PALETTE[index]
