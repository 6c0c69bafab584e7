"""Settings resolution utilities for PaginationInfo configuration."""

from __future__ import annotations

from typing import Any

from pagewise.utils.types import DEFAULT_ITEMS_PER_PAGE, DEFAULT_WINDOW_SIZE


def _positive_setting(cls: type, name: str, default: int) -> int:
    """Read a positive integer from the inner Settings class.

    Args:
        cls: PaginationInfo class
        name: Attribute name on Settings
        default: Value used when the setting is missing or not positive

    Returns:
        Resolved setting value
    """
    settings = getattr(cls, "Settings", None)
    value: Any = getattr(settings, name, None) if settings else None
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return default


class SettingsResolver:
    """Resolves pagination settings from inner Settings class."""

    @staticmethod
    def get_items_per_page(cls: type) -> int:
        """Get default page size from Settings or the library default.

        Args:
            cls: PaginationInfo class

        Returns:
            Default number of items per page
        """
        return _positive_setting(cls, "items_per_page", DEFAULT_ITEMS_PER_PAGE)

    @staticmethod
    def get_window_size(cls: type) -> int:
        """Get the page window size from Settings or the library default.

        Args:
            cls: PaginationInfo class

        Returns:
            Maximum number of page numbers in the navigation window
        """
        return _positive_setting(cls, "window_size", DEFAULT_WINDOW_SIZE)
