"""
Use-case interfaces consumed by the API controllers

Controllers only depend on these signatures. Implementations return a value
on success and raise on failure; storage and authorizer failures surface as
NotFoundError / UnauthorizedError from order_api.core.errors.
"""
from abc import ABC, abstractmethod
from typing import Optional

from order_api.domain.order import (
    Order,
    OrderCreationResponse,
    OrderRequest,
    OrderStatusDTO,
)
from order_api.domain.page import Page, PageParams
from order_api.domain.product import Product, ProductRequest


class ProductUseCase(ABC):

    @abstractmethod
    def get_all_products(self, page_params: PageParams) -> Page[Product]:
        ...

    @abstractmethod
    def get_products_by_category(self, page_params: PageParams, category: str) -> Page[Product]:
        ...

    @abstractmethod
    def create_product(self, product: ProductRequest) -> Optional[Product]:
        ...

    @abstractmethod
    def update_product(self, product_id: str, product: ProductRequest) -> None:
        """Raises NotFoundError when no product has this id"""

    @abstractmethod
    def delete_product(self, product_id: str) -> None:
        """Raises NotFoundError when no product has this id"""


class OrderUseCase(ABC):

    @abstractmethod
    def create_order(self, order: OrderRequest) -> OrderCreationResponse:
        """Raises UnauthorizedError when the customer CPF is rejected"""

    @abstractmethod
    def get_all_orders(self, page_params: PageParams) -> Page[Order]:
        ...

    @abstractmethod
    def get_order_status(self, order_id: int) -> OrderStatusDTO:
        ...

    @abstractmethod
    def update_order_status(self, order_id: int, status: str) -> None:
        ...
