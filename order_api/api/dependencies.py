"""
FastAPI dependency providers for the use cases

Tests swap implementations through app.dependency_overrides.
"""
from order_api.connectors.authorizer_connector import AuthorizerConnector
from order_api.connectors.payment_connector import PaymentConnector
from order_api.repositories.order_repository import OrderRepository
from order_api.repositories.product_repository import ProductRepository
from order_api.services.interfaces import OrderUseCase, ProductUseCase
from order_api.services.order_service import OrderService
from order_api.services.product_service import ProductService


def get_product_usecase() -> ProductUseCase:
    return ProductService(ProductRepository())


def get_order_usecase() -> OrderUseCase:
    return OrderService(
        order_repository=OrderRepository(),
        product_repository=ProductRepository(),
        authorizer=AuthorizerConnector(),
        payment=PaymentConnector(),
    )
