# ABOUTME: Alternating row stripes for the ordered book view.
# ABOUTME: Stripes follow author runs when sorted by author, otherwise alternate per row.

from audioshelf.catalog.types import AudioBook
from audioshelf.core.sorting import SortColumn


def annotate_stripes(books: list[AudioBook], sort_column: SortColumn | None) -> list[AudioBook]:
    """Assign group_stripe (0 or 1) to every book in view order.

    When sorted by author, the stripe flips each time the author changes so a
    run of one author's books shares a stripe. For any other sort (or no sort)
    the stripe simply alternates row by row. Returns the same list.
    """
    if sort_column is SortColumn.AUTHOR:
        stripe = 0
        previous_author: str | None = None
        for book in books:
            if previous_author is not None and book.author != previous_author:
                stripe = 1 - stripe
            book.set_stripe(stripe)
            previous_author = book.author
    else:
        for index, book in enumerate(books):
            book.set_stripe(index % 2)

    return books
