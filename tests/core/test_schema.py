import pytest
from pydantic import ValidationError

from pagewise import PaginationInfo, PaginationMeta


def test_from_info_copies_all_values():
    info = PaginationInfo(45, 3, 20)
    meta = PaginationMeta.from_info(info)
    assert meta.model_dump() == info.to_dict()
    assert meta.has_next_page_number is False
    assert meta.page_number_list == [1, 2, 3]


def test_json_serialization():
    meta = PaginationMeta.from_info(PaginationInfo(0))
    data = meta.model_dump(mode="json")
    assert data["number_of_pages"] == 1
    assert data["last_item_number"] == 0


def test_meta_is_frozen():
    meta = PaginationMeta.from_info(PaginationInfo(10))
    with pytest.raises(ValidationError):
        meta.page_number = 2
