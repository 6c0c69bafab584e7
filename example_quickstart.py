"""
Pagewise Quick Start Example

A simple example to get you started with Pagewise in 5 minutes.

Features covered:
- Build pagination metadata from a total count
- Slice a dataset with offset/limit
- Render a compact navigation bar
- Silent normalization of bad input

Run with: python example_quickstart.py
"""

from pagewise import PaginationInfo, add_listener, enable_tracing


# ============================================================================
# 1. A DATASET AND A CUSTOM DEFAULT
# ============================================================================

PRODUCTS = [f"Product #{i}" for i in range(1, 96)]


class CatalogPagination(PaginationInfo):
    """Catalog pages show 12 products by default."""

    class Settings:
        items_per_page = 12


# ============================================================================
# 2. HELPERS
# ============================================================================


def render_nav(info: PaginationInfo) -> str:
    """Render a text navigation bar like '< 3 4 [5] 6 7 >'."""
    parts = ["<" if info.has_previous_page_number else " "]
    for number in info.page_number_list:
        parts.append(f"[{number}]" if number == info.page_number else str(number))
    parts.append(">" if info.has_next_page_number else " ")
    return " ".join(parts)


def show_page(info: PaginationInfo) -> None:
    page = PRODUCTS[info.offset:info.offset + info.limit]
    print(
        f"   Page {info.page_number}/{info.number_of_pages}: "
        f"items {info.first_item_number}-{info.last_item_number} of {info.number_of_items}"
    )
    print(f"   First on page: {page[0] if page else '-'}")
    print(f"   Nav: {render_nav(info)}")


# ============================================================================
# 3. MAIN
# ============================================================================


def main():
    """Run the quickstart example."""

    print("1️⃣  BASIC - Page 2 of the catalog, 20 per page")
    show_page(PaginationInfo(len(PRODUCTS), 2))

    print("\n2️⃣  SETTINGS - Same page with the catalog default of 12")
    show_page(CatalogPagination(len(PRODUCTS), 2))

    print("\n3️⃣  MOVE - Jump to the last page")
    info = CatalogPagination(len(PRODUCTS))
    show_page(info.with_page(info.number_of_pages))

    print("\n4️⃣  NORMALIZE - Out-of-range and non-positive input")
    enable_tracing()
    add_listener(lambda event: print(f"   ↳ {event.field}: {event.requested} -> {event.resolved}"))
    show_page(PaginationInfo(len(PRODUCTS), 99, -5))

    print("\n5️⃣  EMPTY - No results at all")
    show_page(PaginationInfo(0))

    print("\n✅ All operations completed successfully!")


# ============================================================================
# 4. RUN THE EXAMPLE
# ============================================================================

if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("PAGEWISE QUICKSTART EXAMPLE")
    print("=" * 60 + "\n")

    main()
