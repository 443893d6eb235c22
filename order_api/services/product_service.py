"""
Product Service
Product catalog use cases backed by ProductRepository

Author: TM3
Date: 2025-10-17
"""
from order_api.domain.page import Page, PageParams
from order_api.domain.product import Product, ProductRequest
from order_api.repositories.product_repository import ProductRepository
from order_api.services.interfaces import ProductUseCase


class ProductService(ProductUseCase):

    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def get_all_products(self, page_params: PageParams) -> Page[Product]:
        return self.product_repository.find_all(page_params)

    def get_products_by_category(self, page_params: PageParams, category: str) -> Page[Product]:
        return self.product_repository.find_all(page_params, category=category)

    def create_product(self, product: ProductRequest) -> Product:
        return self.product_repository.create(product)

    def update_product(self, product_id: str, product: ProductRequest) -> None:
        self.product_repository.update(product_id, product)

    def delete_product(self, product_id: str) -> None:
        self.product_repository.delete(product_id)
