"""
API tests for the /v1/products endpoints

The ProductUseCase is replaced by a Mock, so these tests only exercise
binding, validation and error mapping.

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime
from decimal import Decimal

import pytest

from order_api.core.errors import NotFoundError
from order_api.domain.page import Page, PageParams
from order_api.domain.product import Product, ProductRequest

INVALID_JSON_ERROR = "Expecting value: line 1 column 1 (char 0)"


@pytest.fixture
def product_page():
    return Page[Product](
        result=[
            Product(
                id=123,
                name="Product 1",
                sku_id="33333",
                description="Description of product 1",
                category="Acompanhamento",
                price=Decimal("9.99"),
                created_at=datetime(2025, 10, 1, 12, 0, 0),
                updated_at=datetime(2025, 10, 1, 12, 0, 0)
            )
        ],
        next=3
    )


class TestGetProducts:
    """GET /v1/products"""

    @pytest.mark.parametrize("limit,offset", [("123abc", ""), ("1", "123abc")])
    def test_returns_bad_request_when_query_is_not_a_number(self, client, product_usecase, limit, offset):
        response = client.get(f"/v1/products?limit={limit}&offset={offset}")

        assert response.status_code == 400
        assert response.json() == {
            "message": "invalid query parameters",
            "error": "invalid literal for int() with base 10: '123abc'"
        }
        product_usecase.get_all_products.assert_not_called()
        product_usecase.get_products_by_category.assert_not_called()

    def test_error_body_is_compact_json(self, client):
        response = client.get("/v1/products?limit=123abc")

        assert response.text == (
            '{"message":"invalid query parameters",'
            '"error":"invalid literal for int() with base 10: \'123abc\'"}'
        )

    def test_returns_bad_request_when_limit_is_not_positive(self, client):
        response = client.get("/v1/products?limit=0&offset=0")

        assert response.status_code == 400
        assert response.json() == {
            "message": "invalid query parameters",
            "error": "limit must be greater than zero"
        }

    def test_returns_internal_error_when_get_by_category_fails(self, client, product_usecase):
        product_usecase.get_products_by_category.side_effect = Exception("internal server error")

        response = client.get("/v1/products?limit=1&offset=2&category=Acompanhamento")

        assert response.status_code == 500
        assert response.json() == {
            "message": "failed to get products by category",
            "error": "internal server error"
        }
        product_usecase.get_products_by_category.assert_called_once_with(
            PageParams(limit=1, offset=2), "Acompanhamento"
        )

    def test_returns_internal_error_when_get_all_fails(self, client, product_usecase):
        product_usecase.get_all_products.side_effect = Exception("internal server error")

        response = client.get("/v1/products?limit=1&offset=2&category=")

        assert response.status_code == 500
        assert response.json() == {
            "message": "failed to get all products",
            "error": "internal server error"
        }
        product_usecase.get_products_by_category.assert_not_called()

    def test_gets_products_by_category(self, client, product_usecase, product_page, load_testdata):
        product_usecase.get_products_by_category.return_value = product_page

        response = client.get("/v1/products?limit=1&offset=2&category=Acompanhamento")

        assert response.status_code == 200
        assert response.json() == load_testdata("product_response_valid.json")

    def test_gets_all_products(self, client, product_usecase, product_page, load_testdata):
        product_usecase.get_all_products.return_value = product_page

        response = client.get("/v1/products?limit=1&offset=2")

        assert response.status_code == 200
        assert response.json() == load_testdata("product_response_valid.json")
        product_usecase.get_all_products.assert_called_once_with(PageParams(limit=1, offset=2))

    def test_uses_default_window_when_query_is_absent(self, client, product_usecase):
        product_usecase.get_all_products.return_value = Page[Product](result=[])

        response = client.get("/v1/products")

        assert response.status_code == 200
        assert response.json() == {"result": []}
        product_usecase.get_all_products.assert_called_once_with(PageParams(limit=10, offset=0))

    def test_repeated_request_returns_same_page(self, client, product_usecase, product_page):
        product_usecase.get_all_products.return_value = product_page

        first = client.get("/v1/products?limit=1&offset=2")
        second = client.get("/v1/products?limit=1&offset=2")

        assert first.content == second.content


class TestCreateProduct:
    """POST /v1/products"""

    def test_returns_bad_request_when_body_is_not_json(self, client, product_usecase):
        response = client.post("/v1/products", content="<invalidJson>",
                               headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {
            "message": "failed to bind product payload",
            "error": INVALID_JSON_ERROR
        }
        product_usecase.create_product.assert_not_called()

    def test_returns_bad_request_when_field_has_wrong_type(self, client):
        response = client.post("/v1/products", json={"name": "Coca", "category": "Bebida", "price": "abc"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "failed to bind product payload"
        assert body["error"].startswith("price: ")

    def test_returns_bad_request_when_price_is_missing(self, client, product_usecase, read_testdata):
        response = client.post("/v1/products", content=read_testdata("product_request_missing_price.json"))

        assert response.status_code == 400
        assert response.json() == {
            "message": "invalid product payload",
            "error": "price: non zero value required"
        }
        product_usecase.create_product.assert_not_called()

    @pytest.mark.parametrize("price", [0, -1, -9.99])
    def test_returns_bad_request_when_price_is_not_positive(self, client, load_testdata, price):
        payload = load_testdata("product_request_valid.json")
        payload["price"] = price

        response = client.post("/v1/products", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "price: non zero value required"

    def test_returns_internal_error_when_use_case_fails(self, client, product_usecase, read_testdata):
        product_usecase.create_product.side_effect = Exception("internal server error")

        response = client.post("/v1/products", content=read_testdata("product_request_valid.json"))

        assert response.status_code == 500
        assert response.json() == {
            "message": "failed to create product",
            "error": "internal server error"
        }

    def test_creates_product(self, client, product_usecase, read_testdata):
        response = client.post("/v1/products", content=read_testdata("product_request_valid.json"))

        assert response.status_code == 200
        assert response.content == b""
        product_usecase.create_product.assert_called_once_with(ProductRequest(
            name="Batata Frita",
            sku_id="333",
            description="Batata canoa",
            category="Acompanhamento",
            price=Decimal("9.99")
        ))


class TestUpdateProduct:
    """PUT /v1/products/{id}"""

    def test_returns_bad_request_when_id_is_missing(self, client, product_usecase, read_testdata):
        response = client.put("/v1/products", content=read_testdata("product_request_valid.json"))

        assert response.status_code == 400
        assert response.json() == {
            "message": "id path param is required",
            "error": "id path parameter is missing"
        }
        product_usecase.update_product.assert_not_called()

    def test_returns_bad_request_when_body_is_not_json(self, client):
        response = client.put("/v1/products/222", content="<invalidJson>")

        assert response.status_code == 400
        assert response.json() == {
            "message": "failed to bind product payload",
            "error": INVALID_JSON_ERROR
        }

    def test_returns_bad_request_when_price_is_missing(self, client, read_testdata):
        response = client.put("/v1/products/222", content=read_testdata("product_request_missing_price.json"))

        assert response.status_code == 400
        assert response.json() == {
            "message": "invalid product payload",
            "error": "price: non zero value required"
        }

    def test_returns_internal_error_when_use_case_fails(self, client, product_usecase, read_testdata):
        product_usecase.update_product.side_effect = Exception("internal server error")

        response = client.put("/v1/products/222", content=read_testdata("product_request_valid.json"))

        assert response.status_code == 500
        assert response.json() == {
            "message": "failed to update product",
            "error": "internal server error"
        }

    def test_returns_not_found_when_product_does_not_exist(self, client, product_usecase, read_testdata):
        product_usecase.update_product.side_effect = NotFoundError()

        response = client.put("/v1/products/222", content=read_testdata("product_request_valid.json"))

        assert response.status_code == 404
        assert response.json() == {
            "message": "product not found",
            "error": "entity not found"
        }

    def test_updates_product(self, client, product_usecase, read_testdata):
        response = client.put("/v1/products/222", content=read_testdata("product_request_valid.json"))

        assert response.status_code == 200
        assert response.content == b""
        args = product_usecase.update_product.call_args.args
        assert args[0] == "222"
        assert args[1].price == Decimal("9.99")


class TestDeleteProduct:
    """DELETE /v1/products/{id}"""

    def test_returns_bad_request_when_id_is_missing(self, client, product_usecase):
        response = client.delete("/v1/products")

        assert response.status_code == 400
        assert response.json() == {
            "message": "id path param is required",
            "error": "id path parameter is missing"
        }
        product_usecase.delete_product.assert_not_called()

    def test_returns_internal_error_when_use_case_fails(self, client, product_usecase):
        product_usecase.delete_product.side_effect = Exception("internal server error")

        response = client.delete("/v1/products/222")

        assert response.status_code == 500
        assert response.json() == {
            "message": "failed to delete product",
            "error": "internal server error"
        }

    def test_returns_not_found_when_product_does_not_exist(self, client, product_usecase):
        product_usecase.delete_product.side_effect = NotFoundError()

        response = client.delete("/v1/products/222")

        assert response.status_code == 404
        assert response.json() == {
            "message": "product not found",
            "error": "entity not found"
        }

    def test_deletes_product(self, client, product_usecase):
        response = client.delete("/v1/products/222")

        assert response.status_code == 204
        assert response.content == b""
        product_usecase.delete_product.assert_called_once_with("222")
