from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from pagewise.core.window import page_window
from pagewise.lifecycle.observability import NormalizationEvent, emit_event
from pagewise.utils.settings import SettingsResolver
from pagewise.utils.types import DEFAULT_PAGE_NUMBER, as_int


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination metadata for one page of a counted result set.

    Arguments are normalized rather than rejected: a non-positive page size
    becomes the default (20), and a page number outside
    ``1..number_of_pages`` becomes 1. Instances are immutable; use
    :meth:`with_page` to move to another page.

    ``page_number`` and ``items_per_page`` accept None for "use the
    default"; once constructed, all three fields are plain ints.

    Subclasses may declare an inner ``Settings`` class with
    ``items_per_page`` and ``window_size`` to change the defaults.
    """

    number_of_items: int
    page_number: int | None = DEFAULT_PAGE_NUMBER
    items_per_page: int | None = None

    def __post_init__(self) -> None:
        cls = type(self)
        number_of_items = as_int(self.number_of_items, "number_of_items")
        page_number = (
            DEFAULT_PAGE_NUMBER
            if self.page_number is None
            else as_int(self.page_number, "page_number")
        )
        items_per_page = (
            None
            if self.items_per_page is None
            else as_int(self.items_per_page, "items_per_page")
        )

        if number_of_items < 0:
            self._normalized("number_of_items", number_of_items, 0, "must be >= 0")
            number_of_items = 0
        object.__setattr__(self, "number_of_items", number_of_items)

        # Page size first: number_of_pages depends on it.
        default_size = SettingsResolver.get_items_per_page(cls)
        if items_per_page is None:
            items_per_page = default_size
        elif items_per_page <= 0:
            self._normalized("items_per_page", items_per_page, default_size, "must be >= 1")
            items_per_page = default_size
        object.__setattr__(self, "items_per_page", items_per_page)

        if not 1 <= page_number <= self.number_of_pages:
            self._normalized(
                "page_number",
                page_number,
                DEFAULT_PAGE_NUMBER,
                f"outside 1..{self.number_of_pages}",
            )
            page_number = DEFAULT_PAGE_NUMBER
        object.__setattr__(self, "page_number", page_number)

    def _normalized(self, field: str, requested: int, resolved: int, reason: str) -> None:
        emit_event(
            NormalizationEvent(
                field=field,
                requested=requested,
                resolved=resolved,
                reason=reason,
                info_class=type(self).__name__,
            )
        )

    # --- Page counts ---

    @property
    def number_of_pages(self) -> int:
        if self.number_of_items == 0:
            return 1
        # Integer ceiling division: exact for counts beyond float precision.
        return -(-self.number_of_items // self.items_per_page)

    # --- Item range ---

    @property
    def first_item_number(self) -> int:
        """1-based position of the first item on the current page."""
        return 1 + (self.page_number - 1) * self.items_per_page

    @property
    def last_item_number(self) -> int:
        """1-based position of the last item on the current page.

        Equals ``first_item_number - 1`` when there are no items.
        """
        return min(self.first_item_number + self.items_per_page - 1, self.number_of_items)

    @property
    def number_of_items_to_skip(self) -> int:
        return (self.page_number - 1) * self.items_per_page

    @property
    def offset(self) -> int:
        """Alias of ``number_of_items_to_skip`` for offset/limit queries."""
        return self.number_of_items_to_skip

    @property
    def limit(self) -> int:
        return self.items_per_page

    # --- Navigation ---

    @property
    def previous_page_number(self) -> int:
        """Previous page, or 1 on the first page.

        Check ``has_previous_page_number`` to tell the two apart.
        """
        return max(self.page_number - 1, 1)

    @property
    def has_previous_page_number(self) -> bool:
        return self.previous_page_number != self.page_number

    @property
    def next_page_number(self) -> int:
        """Next page, or the last page when already there."""
        return min(self.page_number + 1, self.number_of_pages)

    @property
    def has_next_page_number(self) -> bool:
        return self.next_page_number != self.page_number

    @property
    def page_number_list(self) -> list[int]:
        """Nearby page numbers for rendering navigation, e.g. ``[3, 4, 5, 6, 7]``."""
        return page_window(
            self.page_number,
            self.number_of_pages,
            SettingsResolver.get_window_size(type(self)),
        )

    short_page_list = page_number_list

    # --- Derivation ---

    def with_page(self, page_number: int) -> PaginationInfo:
        """Return the same result set positioned on another page."""
        return dataclasses.replace(self, page_number=page_number)

    def to_dict(self) -> dict[str, Any]:
        return {
            "number_of_items": self.number_of_items,
            "page_number": self.page_number,
            "items_per_page": self.items_per_page,
            "number_of_pages": self.number_of_pages,
            "first_item_number": self.first_item_number,
            "last_item_number": self.last_item_number,
            "number_of_items_to_skip": self.number_of_items_to_skip,
            "previous_page_number": self.previous_page_number,
            "has_previous_page_number": self.has_previous_page_number,
            "next_page_number": self.next_page_number,
            "has_next_page_number": self.has_next_page_number,
            "page_number_list": self.page_number_list,
        }
