"""
Orders API Endpoints
Handles order creation, listing and status transitions

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: controller with injected OrderUseCase)
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.concurrency import run_in_threadpool

from order_api.api.binding import bind_json, bind_page_params, parse_int
from order_api.api.dependencies import get_order_usecase
from order_api.api.responses import bad_request, no_content, ok, use_case_error
from order_api.core.errors import DecodeError, ErrorContext, ValidationError
from order_api.domain.order import OrderRequest, OrderStatusRequest
from order_api.domain.validation import validate_order, validate_order_status
from order_api.services.interfaces import OrderUseCase

CREATE = ErrorContext("failed to create order", unauthorized_message="customer cpf invalid")
GET_ALL = ErrorContext("failed to get all orders")
GET_STATUS = ErrorContext("failed to get order status")
UPDATE_STATUS = ErrorContext("failed to update order status")


class OrderController:
    """Translates order HTTP requests into OrderUseCase calls"""

    def __init__(self, order_usecase: OrderUseCase):
        self.order_usecase = order_usecase

    def create_order(self, body: bytes) -> Response:
        try:
            order = bind_json(body, OrderRequest)
        except DecodeError as e:
            return bad_request("failed to bind order payload", e)

        violations = validate_order(order)
        if violations:
            return bad_request("invalid order payload", ValidationError(violations))

        try:
            created = self.order_usecase.create_order(order)
        except Exception as e:
            return use_case_error(CREATE, e)

        return ok(created.to_dict())

    def get_all_orders(self, limit: Optional[str], offset: Optional[str]) -> Response:
        try:
            page_params = bind_page_params(limit, offset)
        except DecodeError as e:
            return bad_request("invalid query parameters", e)

        try:
            page = self.order_usecase.get_all_orders(page_params)
        except Exception as e:
            return use_case_error(GET_ALL, e)

        return ok(page.to_dict())

    def get_order_status(self, order_id: Optional[str]) -> Response:
        if not order_id:
            return bad_request("[id] path parameter is required", DecodeError("id is missing"))
        try:
            numeric_id = parse_int(order_id)
        except DecodeError as e:
            return bad_request("[id] path parameter is invalid", e)

        try:
            order_status = self.order_usecase.get_order_status(numeric_id)
        except Exception as e:
            return use_case_error(GET_STATUS, e)

        return ok(order_status.to_dict())

    def update_order_status(self, order_id: Optional[str], body: bytes) -> Response:
        if not order_id:
            return bad_request("[id] path parameter is required", DecodeError("id is missing"))
        try:
            numeric_id = parse_int(order_id)
        except DecodeError as e:
            return bad_request("[id] path parameter is invalid", e)

        try:
            payload = bind_json(body, OrderStatusRequest)
        except DecodeError as e:
            return bad_request("failed to bind order status payload", e)

        violations = validate_order_status(payload)
        if violations:
            return bad_request("invalid order status payload", ValidationError(violations))

        try:
            self.order_usecase.update_order_status(numeric_id, payload.status)
        except Exception as e:
            return use_case_error(UPDATE_STATUS, e)

        return no_content()


def get_order_controller(order_usecase: OrderUseCase = Depends(get_order_usecase)) -> OrderController:
    return OrderController(order_usecase)


router = APIRouter()


@router.post("")
async def create_order(request: Request, controller: OrderController = Depends(get_order_controller)):
    """
    Create an order

    Returns {"qrCode": ..., "orderId": ...} so the customer can pay.
    A customer CPF rejected by the authorizer yields 403.
    """
    body = await request.body()
    return await run_in_threadpool(controller.create_order, body)


@router.get("")
async def get_orders(
    limit: Optional[str] = Query(None, description="Page size"),
    offset: Optional[str] = Query(None, description="Rows to skip"),
    controller: OrderController = Depends(get_order_controller)
):
    """Get a page of orders"""
    return await run_in_threadpool(controller.get_all_orders, limit, offset)


@router.get("/{order_id}/status")
async def get_order_status(order_id: str, controller: OrderController = Depends(get_order_controller)):
    """Get the current status of an order"""
    return await run_in_threadpool(controller.get_order_status, order_id)


@router.put("/{order_id}/status")
async def update_order_status(
    order_id: str,
    request: Request,
    controller: OrderController = Depends(get_order_controller)
):
    """Move an order to another status. Returns 204."""
    body = await request.body()
    return await run_in_threadpool(controller.update_order_status, order_id, body)
