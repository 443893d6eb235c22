"""
Unit tests for Page windowing
"""
from order_api.domain.page import Page, PageParams
from order_api.domain.product import Product


def make_products(count):
    return [
        Product(id=i, name=f"Product {i}", category="Lanche", price="10.50")
        for i in range(1, count + 1)
    ]


class TestFromWindow:

    def test_extra_row_sets_next(self):
        page = Page[Product].from_window(make_products(3), PageParams(limit=2, offset=4))

        assert [product.id for product in page.result] == [1, 2]
        assert page.next == 6

    def test_short_window_is_last_page(self):
        page = Page[Product].from_window(make_products(2), PageParams(limit=2, offset=0))

        assert len(page.result) == 2
        assert page.next is None

    def test_empty_window(self):
        page = Page[Product].from_window([], PageParams(limit=10, offset=30))

        assert page.result == []
        assert page.next is None


class TestToDict:

    def test_next_is_omitted_on_last_page(self):
        data = Page[Product](result=make_products(1)).to_dict()

        assert data == {
            "result": [{
                "id": 1,
                "name": "Product 1",
                "skuId": None,
                "description": None,
                "category": "Lanche",
                "price": 10.5,
                "createdAt": None,
                "updatedAt": None
            }]
        }

    def test_next_is_serialized(self):
        data = Page[Product](result=make_products(1), next=1).to_dict()

        assert data["next"] == 1
