"""
Pagewise with FastAPI Example

Demonstrates paginated list endpoints built with Pagewise and FastAPI.

Features covered:
- PaginationParams dependency (lenient page/size parsing)
- PaginatedResponse model with full pagination metadata
- Navigation links that keep other query parameters
- Link headers for API clients

Run with:
  pip install uvicorn
  uvicorn example_fastapi:app --reload

Then visit: http://localhost:8000/docs
"""

from typing import Optional

from fastapi import Depends, FastAPI, Query, Request, Response
from pydantic import BaseModel

from pagewise import PaginationInfo, PaginationMeta
from pagewise.integrations.fastapi import (
    PaginatedResponse,
    PaginationParams,
    pagination_links,
)


# ============================================================================
# 1. MODELS AND DATA
# ============================================================================


class Book(BaseModel):
    """A book in the library catalog."""

    id: int
    title: str
    genre: str


GENRES = ["fiction", "history", "science"]
BOOKS = [
    Book(id=i, title=f"Book {i}", genre=GENRES[i % len(GENRES)])
    for i in range(1, 238)
]


class BookPagination(PaginationInfo):
    class Settings:
        items_per_page = 25
        window_size = 7


class BookParams(PaginationParams):
    info_class = BookPagination
    max_size = 50


class BookPage(PaginatedResponse[Book]):
    links: dict[str, Optional[str]]


# ============================================================================
# 2. APP
# ============================================================================


app = FastAPI(
    title="Pagewise Library API",
    description="Paginated listings built with Pagewise and FastAPI",
    version="1.0.0",
)


@app.get("/books", response_model=BookPage, tags=["Books"])
async def list_books(
    request: Request,
    response: Response,
    genre: Optional[str] = Query(None),
    params: BookParams = Depends(),
):
    """List books. Malformed or out-of-range pages fall back to page 1."""
    books = [b for b in BOOKS if genre is None or b.genre == genre]
    info = params.paginate(len(books))
    links = pagination_links(request.url, info)

    response.headers["Link"] = ", ".join(
        f'<{url}>; rel="{rel}"' for rel, url in links.items() if url is not None
    )
    response.headers["X-Total-Count"] = str(info.number_of_items)

    return BookPage(
        items=books[info.offset:info.offset + info.limit],
        pagination=PaginationMeta.from_info(info),
        links=links,
    )


@app.get("/books/pages", tags=["Books"])
async def book_page_summary(params: BookParams = Depends()):
    """Only the pagination metadata, for clients that render navigation first."""
    info = params.paginate(len(BOOKS))
    return info.to_dict()
