"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and their items.
Returns Order domain models with embedded product snapshots.

Author: TM3
Date: 2025-10-17
"""
import logging
from decimal import Decimal
from typing import Dict, List

from order_api.core.database import get_db_connection_dict_with_retry
from order_api.core.errors import NotFoundError
from order_api.domain.order import Order, OrderItem, OrderRequest, OrderStatusDTO
from order_api.domain.page import Page, PageParams
from order_api.domain.product import Product

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    Repository for Order data access

    Orders and their items are written in a single transaction.
    Listing avoids N+1 queries: one query for the page of orders and one
    for all of their items.
    """

    @staticmethod
    def _map_row_to_item(row: dict) -> OrderItem:
        return OrderItem(
            id=row['id'],
            quantity=row['quantity'],
            type=row['type'],
            product=Product(
                id=row['product_id'],
                name=row['product_name'],
                sku_id=row['product_sku_id'],
                description=row['product_description'],
                category=row['product_category'],
                price=row['product_price'],
                created_at=row['product_created_at'],
                updated_at=row['product_updated_at']
            )
        )

    def create(self, order: OrderRequest, total_amount: Decimal) -> int:
        """
        Insert an order and its items

        Args:
            order: Validated order payload
            total_amount: Precomputed order total

        Returns:
            The new order id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO orders (coupon, total_amount, status, customer_cpf, created_at)
                VALUES (%s, %s, %s, %s, NOW())
                RETURNING id
            """, (order.coupon, total_amount, order.status, order.customer_cpf))
            order_id = cursor.fetchone()['id']

            for item in order.items:
                cursor.execute("""
                    INSERT INTO order_items (order_id, product_id, quantity, type)
                    VALUES (%s, %s, %s, %s)
                """, (order_id, item.product_id, item.quantity, item.type))

            conn.commit()
            logger.info(f"Order {order_id} created with {len(order.items)} items")
            return order_id

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def find_all(self, page_params: PageParams) -> Page[Order]:
        """
        Find a page of orders, oldest first

        Fetches limit + 1 orders so the page knows whether a next one exists.
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, coupon, total_amount, status, created_at, customer_cpf
                FROM orders
                ORDER BY created_at, id
                LIMIT %s OFFSET %s
            """, (page_params.limit + 1, page_params.offset))
            rows = cursor.fetchall()

            items_by_order: Dict[int, List[OrderItem]] = {row['id']: [] for row in rows}

            if items_by_order:
                cursor.execute("""
                    SELECT
                        oi.id, oi.order_id, oi.quantity, oi.type,
                        p.id as product_id,
                        p.name as product_name,
                        p.sku_id as product_sku_id,
                        p.description as product_description,
                        p.category as product_category,
                        p.price as product_price,
                        p.created_at as product_created_at,
                        p.updated_at as product_updated_at
                    FROM order_items oi
                    JOIN products p ON oi.product_id = p.id
                    WHERE oi.order_id = ANY(%s)
                    ORDER BY oi.id
                """, (list(items_by_order.keys()),))

                for item_row in cursor.fetchall():
                    items_by_order[item_row['order_id']].append(self._map_row_to_item(item_row))

            orders = []
            for row in rows:
                order_dict = dict(row)
                order_dict['items'] = items_by_order[row['id']]
                orders.append(Order(**order_dict))

            return Page[Order].from_window(orders, page_params)

        finally:
            cursor.close()
            conn.close()

    def find_status(self, order_id: int) -> OrderStatusDTO:
        """
        Get the current status of an order

        Raises:
            NotFoundError: no order with this id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("SELECT status FROM orders WHERE id = %s", (order_id,))
            row = cursor.fetchone()
            if not row:
                raise NotFoundError()

            return OrderStatusDTO(status=row['status'])

        finally:
            cursor.close()
            conn.close()

    def update_status(self, order_id: int, status: str) -> None:
        """
        Move an order to another status

        Raises:
            NotFoundError: no order with this id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("UPDATE orders SET status = %s WHERE id = %s", (status, order_id))

            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError()

            conn.commit()
            logger.info(f"Order {order_id} moved to {status}")

        except NotFoundError:
            raise

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
