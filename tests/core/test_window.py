import pytest

from pagewise import page_window


class TestPageWindow:
    @pytest.mark.parametrize(
        "page, expected",
        [
            (1, [1, 2, 3, 4, 5]),
            (2, [1, 2, 3, 4, 5]),
            (3, [1, 2, 3, 4, 5]),
            (4, [2, 3, 4, 5, 6]),
            (5, [3, 4, 5, 6, 7]),
            (8, [6, 7, 8, 9, 10]),
            (9, [6, 7, 8, 9, 10]),
            (10, [6, 7, 8, 9, 10]),
        ],
    )
    def test_ten_pages(self, page, expected):
        assert page_window(page, 10) == expected

    @pytest.mark.parametrize("page", [1, 2, 3])
    def test_fewer_pages_than_window(self, page):
        assert page_window(page, 3) == [1, 2, 3]

    def test_single_page(self):
        assert page_window(1, 1) == [1]

    def test_custom_size(self):
        assert page_window(5, 10, size=3) == [4, 5, 6]
        assert page_window(10, 10, size=3) == [8, 9, 10]
        assert page_window(1, 10, size=7) == [1, 2, 3, 4, 5, 6, 7]

    def test_size_of_one(self):
        assert page_window(4, 10, size=1) == [4]

    @pytest.mark.parametrize("size", [0, -3])
    def test_non_positive_size_uses_default(self, size):
        assert page_window(5, 10, size=size) == [3, 4, 5, 6, 7]
