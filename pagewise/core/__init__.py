from pagewise.core.pagination import PaginationInfo
from pagewise.core.schema import PaginationMeta
from pagewise.core.window import page_window

__all__ = [
    "PaginationInfo",
    "PaginationMeta",
    "page_window",
]
