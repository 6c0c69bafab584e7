"""Sliding window of page numbers for compact navigation controls."""

from __future__ import annotations

from pagewise.utils.types import DEFAULT_WINDOW_SIZE


def page_window(
    page_number: int,
    number_of_pages: int,
    size: int = DEFAULT_WINDOW_SIZE,
) -> list[int]:
    """Return up to ``size`` page numbers around the current page.

    The window keeps ``size // 2`` pages before the current one while there
    is room after it. Near the last page it shifts left so the window stays
    full, e.g. ``[6, 7, 8, 9, 10]`` for page 10 of 10.

    Args:
        page_number: Current page (1-based)
        number_of_pages: Total number of pages
        size: Maximum number of page numbers to return

    Returns:
        Ascending list of distinct page numbers within 1..number_of_pages
    """
    if size < 1:
        size = DEFAULT_WINDOW_SIZE

    pages = [
        n
        for n in range(page_number - size, page_number + size)
        if 1 <= n <= number_of_pages
    ]

    lead = size // 2
    distance = number_of_pages - page_number
    if distance >= size - 1 - lead:
        lowest = page_number - lead
    else:
        lowest = page_number - (size - 1 - distance)

    return [n for n in pages if n >= lowest][:size]
