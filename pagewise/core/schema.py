from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pagewise.core.pagination import PaginationInfo


class PaginationMeta(BaseModel):
    """Serializable snapshot of a PaginationInfo for API responses."""

    model_config = ConfigDict(frozen=True)

    number_of_items: int
    page_number: int
    items_per_page: int
    number_of_pages: int
    first_item_number: int
    last_item_number: int
    number_of_items_to_skip: int
    previous_page_number: int
    has_previous_page_number: bool
    next_page_number: int
    has_next_page_number: bool
    page_number_list: list[int]

    @classmethod
    def from_info(cls, info: PaginationInfo) -> PaginationMeta:
        return cls(**info.to_dict())
