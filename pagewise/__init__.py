from pagewise.core import (
    PaginationInfo,
    PaginationMeta,
    page_window,
)
from pagewise.lifecycle import (
    enable_tracing,
    disable_tracing,
    NormalizationEvent,
    add_listener,
    remove_listener,
    capture_normalizations,
)
from pagewise.utils import (
    PagewiseError,
    InvalidPaginationArgument,
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_WINDOW_SIZE,
    coerce_int,
)

__all__ = [
    # Core
    "PaginationInfo",
    "PaginationMeta",
    "page_window",
    # Lifecycle
    "enable_tracing",
    "disable_tracing",
    "NormalizationEvent",
    "add_listener",
    "remove_listener",
    "capture_normalizations",
    # Utils
    "PagewiseError",
    "InvalidPaginationArgument",
    "DEFAULT_ITEMS_PER_PAGE",
    "DEFAULT_WINDOW_SIZE",
    "coerce_int",
]
