"""
Order Service
Order use cases: checkout with customer authorization and QR payment,
listing and status transitions

Author: TM3
Date: 2025-10-17
"""
import logging
from decimal import Decimal

from order_api.connectors.authorizer_connector import AuthorizerConnector
from order_api.connectors.payment_connector import PaymentConnector
from order_api.core.errors import NotFoundError
from order_api.domain.order import (
    Order,
    OrderCreationResponse,
    OrderRequest,
    OrderStatusDTO,
)
from order_api.domain.page import Page, PageParams
from order_api.repositories.order_repository import OrderRepository
from order_api.repositories.product_repository import ProductRepository
from order_api.services.interfaces import OrderUseCase

logger = logging.getLogger(__name__)


class OrderService(OrderUseCase):
    """
    Service for the order lifecycle

    Handles:
    - Customer authorization (only when a CPF is given)
    - Product lookup and total computation
    - Order storage
    - Payment QR code creation
    """

    def __init__(self, order_repository: OrderRepository, product_repository: ProductRepository,
                 authorizer: AuthorizerConnector, payment: PaymentConnector):
        self.order_repository = order_repository
        self.product_repository = product_repository
        self.authorizer = authorizer
        self.payment = payment

    def create_order(self, order: OrderRequest) -> OrderCreationResponse:
        """
        Create an order and its payment QR code

        Raises:
            UnauthorizedError: the authorizer rejected the customer CPF
            NotFoundError: an item references an unknown product
        """
        if order.customer_cpf:
            self.authorizer.authorize(order.customer_cpf)

        lines = []
        total_amount = Decimal("0")
        for item in order.items:
            product = self.product_repository.find_by_id(item.product_id)
            if product is None:
                raise NotFoundError(f"product {item.product_id} not found")
            lines.append({'product': product, 'quantity': item.quantity})
            total_amount += product.price * item.quantity

        order_id = self.order_repository.create(order, total_amount)
        qr_code = self.payment.create_qr_code(order_id, total_amount, lines)

        logger.info(f"Order {order_id} created, total {total_amount}")
        return OrderCreationResponse(qr_code=qr_code, order_id=order_id)

    def get_all_orders(self, page_params: PageParams) -> Page[Order]:
        return self.order_repository.find_all(page_params)

    def get_order_status(self, order_id: int) -> OrderStatusDTO:
        return self.order_repository.find_status(order_id)

    def update_order_status(self, order_id: int, status: str) -> None:
        self.order_repository.update_status(order_id, status)
