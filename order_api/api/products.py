"""
Products API Endpoints
Handles product catalog management and queries

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: controller with injected ProductUseCase)
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.concurrency import run_in_threadpool

from order_api.api.binding import bind_json, bind_page_params
from order_api.api.dependencies import get_product_usecase
from order_api.api.responses import bad_request, no_content, ok, use_case_error
from order_api.core.errors import DecodeError, ErrorContext, ValidationError
from order_api.domain.product import ProductRequest
from order_api.domain.validation import validate_product
from order_api.services.interfaces import ProductUseCase

GET_BY_CATEGORY = ErrorContext("failed to get products by category")
GET_ALL = ErrorContext("failed to get all products")
CREATE = ErrorContext("failed to create product")
UPDATE = ErrorContext("failed to update product", not_found_message="product not found")
DELETE = ErrorContext("failed to delete product", not_found_message="product not found")


class ProductController:
    """
    Translates product HTTP requests into ProductUseCase calls

    Every method returns the final Response; nothing raises past it.
    """

    def __init__(self, product_usecase: ProductUseCase):
        self.product_usecase = product_usecase

    def get_products(self, category: Optional[str], limit: Optional[str], offset: Optional[str]) -> Response:
        try:
            page_params = bind_page_params(limit, offset)
        except DecodeError as e:
            return bad_request("invalid query parameters", e)

        if category:
            try:
                page = self.product_usecase.get_products_by_category(page_params, category)
            except Exception as e:
                return use_case_error(GET_BY_CATEGORY, e)
        else:
            try:
                page = self.product_usecase.get_all_products(page_params)
            except Exception as e:
                return use_case_error(GET_ALL, e)

        return ok(page.to_dict())

    def create_product(self, body: bytes) -> Response:
        try:
            product = bind_json(body, ProductRequest)
        except DecodeError as e:
            return bad_request("failed to bind product payload", e)

        violations = validate_product(product)
        if violations:
            return bad_request("invalid product payload", ValidationError(violations))

        try:
            self.product_usecase.create_product(product)
        except Exception as e:
            return use_case_error(CREATE, e)

        return ok()

    def update_product(self, product_id: Optional[str], body: bytes) -> Response:
        if not product_id:
            return bad_request("id path param is required", DecodeError("id path parameter is missing"))

        try:
            product = bind_json(body, ProductRequest)
        except DecodeError as e:
            return bad_request("failed to bind product payload", e)

        violations = validate_product(product)
        if violations:
            return bad_request("invalid product payload", ValidationError(violations))

        try:
            self.product_usecase.update_product(product_id, product)
        except Exception as e:
            return use_case_error(UPDATE, e)

        return ok()

    def delete_product(self, product_id: Optional[str]) -> Response:
        if not product_id:
            return bad_request("id path param is required", DecodeError("id path parameter is missing"))

        try:
            self.product_usecase.delete_product(product_id)
        except Exception as e:
            return use_case_error(DELETE, e)

        return no_content()


def get_product_controller(product_usecase: ProductUseCase = Depends(get_product_usecase)) -> ProductController:
    return ProductController(product_usecase)


router = APIRouter()


@router.get("")
async def get_products(
    category: Optional[str] = Query(None, description="Filter by category"),
    limit: Optional[str] = Query(None, description="Page size"),
    offset: Optional[str] = Query(None, description="Rows to skip"),
    controller: ProductController = Depends(get_product_controller)
):
    """
    Get products, optionally filtered by category

    Returns a page: {"result": [...], "next": <offset>} where next is only
    present when there are more products.
    """
    return await run_in_threadpool(controller.get_products, category, limit, offset)


@router.post("")
async def create_product(request: Request, controller: ProductController = Depends(get_product_controller)):
    """Create a product. Returns 200 with an empty body."""
    body = await request.body()
    return await run_in_threadpool(controller.create_product, body)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    request: Request,
    controller: ProductController = Depends(get_product_controller)
):
    """Replace a product. Returns 200 with an empty body, 404 if it does not exist."""
    body = await request.body()
    return await run_in_threadpool(controller.update_product, product_id, body)


@router.put("", include_in_schema=False)
async def update_product_without_id(request: Request, controller: ProductController = Depends(get_product_controller)):
    body = await request.body()
    return await run_in_threadpool(controller.update_product, None, body)


@router.delete("/{product_id}")
async def delete_product(product_id: str, controller: ProductController = Depends(get_product_controller)):
    """Delete a product. Returns 204, 404 if it does not exist."""
    return await run_in_threadpool(controller.delete_product, product_id)


@router.delete("", include_in_schema=False)
async def delete_product_without_id(controller: ProductController = Depends(get_product_controller)):
    return await run_in_threadpool(controller.delete_product, None)
