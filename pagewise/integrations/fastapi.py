from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from fastapi import Query
from pydantic import BaseModel
from starlette.datastructures import URL

from pagewise.core.pagination import PaginationInfo
from pagewise.core.schema import PaginationMeta
from pagewise.utils.types import DEFAULT_PAGE_NUMBER, coerce_int

T = TypeVar("T")


class PaginationParams:
    """FastAPI dependency for pagination parameters.

    Query values are read as raw strings so malformed input never turns
    into a 422: ``?page=abc`` resolves to page 1 and a bad ``size`` to the
    default page size. ``size`` is capped at ``max_size``.
    """

    max_size: int = 100
    info_class: type[PaginationInfo] = PaginationInfo

    def __init__(
        self,
        page: Optional[str] = Query(None, description="1-based page number"),
        size: Optional[str] = Query(None, description="Items per page"),
    ):
        self.page = coerce_int(page, DEFAULT_PAGE_NUMBER)
        parsed_size = coerce_int(size, 0)
        self.size = min(parsed_size, self.max_size) if parsed_size > 0 else None

    def paginate(self, total: int) -> PaginationInfo:
        """Build pagination metadata once the total item count is known."""
        return self.info_class(total, self.page, self.size)


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response model for API endpoints."""

    items: list[T]
    pagination: PaginationMeta

    @classmethod
    def from_info(cls, items: list[Any], info: PaginationInfo) -> PaginatedResponse:
        return cls(items=items, pagination=PaginationMeta.from_info(info))


def pagination_links(
    url: URL | str,
    info: PaginationInfo,
    *,
    page_param: str = "page",
) -> dict[str, str | None]:
    """Build first/prev/next/last navigation URLs for the current page.

    Other query parameters on ``url`` are preserved. ``prev`` and ``next``
    are None when there is no such page.

    Args:
        url: Request URL (``request.url``) or a URL string
        info: Pagination metadata for the current page
        page_param: Query parameter carrying the page number

    Returns:
        Mapping of link relation to URL
    """
    if not isinstance(url, URL):
        url = URL(url)

    def link(page_number: int) -> str:
        return str(url.include_query_params(**{page_param: page_number}))

    return {
        "first": link(1),
        "prev": link(info.previous_page_number) if info.has_previous_page_number else None,
        "next": link(info.next_page_number) if info.has_next_page_number else None,
        "last": link(info.number_of_pages),
    }
