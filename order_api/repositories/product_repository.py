"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: TM3
Date: 2025-10-17
"""
import logging
import re
from typing import Optional

from order_api.core.database import get_db_connection_dict_with_retry
from order_api.core.errors import NotFoundError
from order_api.domain.page import Page, PageParams
from order_api.domain.product import Product, ProductRequest

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = """
    id, name, sku_id, description, category, price, created_at, updated_at
"""

_PRODUCT_ID = re.compile(r"-?[0-9]+")


def parse_product_id(product_id) -> int:
    """Ids that are not plain base-10 integers cannot match any row"""
    if isinstance(product_id, int):
        return product_id
    if not isinstance(product_id, str) or not _PRODUCT_ID.fullmatch(product_id):
        raise NotFoundError()
    return int(product_id)


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    Update and delete raise NotFoundError when no row matches.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        return Product(
            id=row['id'],
            name=row['name'],
            sku_id=row['sku_id'],
            description=row['description'],
            category=row['category'],
            price=row['price'],
            created_at=row['created_at'],
            updated_at=row.get('updated_at')
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = %s
            """, (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def find_all(self, page_params: PageParams, category: Optional[str] = None) -> Page[Product]:
        """
        Find a page of products, optionally restricted to one category

        Fetches limit + 1 rows so the page knows whether a next one exists.

        Args:
            page_params: limit/offset window
            category: Exact category label

        Returns:
            Page of products ordered by id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            conditions = []
            params = []

            if category:
                conditions.append("category = %s")
                params.append(category)

            where_clause = " AND ".join(conditions) if conditions else "1=1"

            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE {where_clause}
                ORDER BY id
                LIMIT %s OFFSET %s
            """, params + [page_params.limit + 1, page_params.offset])

            rows = cursor.fetchall()
            products = [self._map_row_to_product(row) for row in rows]

            return Page[Product].from_window(products, page_params)

        finally:
            cursor.close()
            conn.close()

    def create(self, product: ProductRequest) -> Product:
        """Insert a product and return it with its generated id"""
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO products (name, sku_id, description, category, price, created_at, updated_at)
                VALUES (%s, %s, %s, %s, %s, NOW(), NOW())
                RETURNING {PRODUCT_COLUMNS}
            """, (product.name, product.sku_id, product.description, product.category, product.price))

            row = cursor.fetchone()
            conn.commit()
            logger.info(f"Product {row['id']} created")
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update(self, product_id, product: ProductRequest) -> None:
        """
        Replace every editable field of a product

        Raises:
            NotFoundError: no product with this id
        """
        numeric_id = parse_product_id(product_id)
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE products SET
                    name = %s,
                    sku_id = %s,
                    description = %s,
                    category = %s,
                    price = %s,
                    updated_at = NOW()
                WHERE id = %s
            """, (product.name, product.sku_id, product.description, product.category, product.price, numeric_id))

            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError()

            conn.commit()
            logger.info(f"Product {numeric_id} updated")

        except NotFoundError:
            raise

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, product_id) -> None:
        """
        Delete a product

        Raises:
            NotFoundError: no product with this id
        """
        numeric_id = parse_product_id(product_id)
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM products WHERE id = %s", (numeric_id,))

            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError()

            conn.commit()
            logger.info(f"Product {numeric_id} deleted")

        except NotFoundError:
            raise

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
