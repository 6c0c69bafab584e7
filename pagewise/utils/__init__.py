from pagewise.utils.exceptions import (
    PagewiseError,
    InvalidPaginationArgument,
)
from pagewise.utils.settings import SettingsResolver
from pagewise.utils.types import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_PAGE_NUMBER,
    DEFAULT_WINDOW_SIZE,
    as_int,
    coerce_int,
)

__all__ = [
    "PagewiseError",
    "InvalidPaginationArgument",
    "SettingsResolver",
    "DEFAULT_ITEMS_PER_PAGE",
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_WINDOW_SIZE",
    "as_int",
    "coerce_int",
]
