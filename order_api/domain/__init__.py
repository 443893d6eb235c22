"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities
and the request/response payloads built around them.

Author: TM3
Date: 2025-10-17
"""
from order_api.domain.product import Product, ProductRequest
from order_api.domain.order import (
    ItemType,
    Order,
    OrderCreationResponse,
    OrderItem,
    OrderItemRequest,
    OrderRequest,
    OrderStatus,
    OrderStatusDTO,
    OrderStatusRequest,
)
from order_api.domain.page import Page, PageParams

__all__ = [
    'Product', 'ProductRequest',
    'ItemType', 'Order', 'OrderItem', 'OrderStatus',
    'OrderItemRequest', 'OrderRequest', 'OrderStatusRequest',
    'OrderCreationResponse', 'OrderStatusDTO',
    'Page', 'PageParams',
]
