"""
Payment Connector
Creates in-store QR code payments for orders (Mercado Pago instore API)

Author: TM3
Date: 2025-10-17
"""
import logging
from decimal import Decimal
from typing import Dict, List, Optional

import httpx

from order_api.core.config import settings
from order_api.core.errors import OrderAPIError
from order_api.domain.product import Product

logger = logging.getLogger(__name__)


class PaymentError(OrderAPIError):
    """The payment provider answered without a usable QR code"""


class PaymentConnector:
    """
    Connector for the QR code payment provider

    Handles:
    - Building the provider order from our order items
    - Requesting the dynamic QR code for the configured point of sale
    """

    def __init__(self, base_url: str = None, access_token: str = None,
                 collector_id: str = None, pos_id: str = None,
                 timeout: float = None, client: Optional[httpx.Client] = None):
        self.base_url = (base_url or settings.PAYMENT_API_URL).rstrip("/")
        self.access_token = access_token or settings.PAYMENT_ACCESS_TOKEN
        self.collector_id = collector_id or settings.PAYMENT_COLLECTOR_ID
        self.pos_id = pos_id or settings.PAYMENT_POS_ID
        self.timeout = timeout or settings.PAYMENT_TIMEOUT
        self.client = client

    @property
    def qr_url(self) -> str:
        return (f"{self.base_url}/instore/orders/qr/seller/collectors/"
                f"{self.collector_id}/pos/{self.pos_id}/qrs")

    def _post(self, payload: dict) -> httpx.Response:
        headers = {
            'Authorization': f'Bearer {self.access_token}',
            'Content-Type': 'application/json'
        }
        if self.client is not None:
            return self.client.post(self.qr_url, json=payload, headers=headers, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.qr_url, json=payload, headers=headers)

    @staticmethod
    def build_payload(order_id: int, total_amount: Decimal, lines: List[Dict]) -> dict:
        """
        Build the provider order

        Args:
            order_id: Our order id, sent as external_reference
            total_amount: Order total
            lines: Dicts with 'product' (Product) and 'quantity' (int)
        """
        items = []
        for line in lines:
            product: Product = line['product']
            quantity = line['quantity']
            items.append({
                "sku_number": product.sku_id or str(product.id),
                "category": product.category,
                "title": product.name,
                "unit_price": float(product.price),
                "quantity": quantity,
                "unit_measure": "unit",
                "total_amount": float(product.price * quantity)
            })

        return {
            "external_reference": str(order_id),
            "title": f"Order {order_id}",
            "description": f"Order {order_id}",
            "total_amount": float(total_amount),
            "items": items
        }

    def create_qr_code(self, order_id: int, total_amount: Decimal, lines: List[Dict]) -> str:
        """
        Request a QR code for an order

        Returns:
            The QR code data the customer scans to pay

        Raises:
            httpx.HTTPError: provider unreachable or returned an error status
            PaymentError: provider response has no qr_data
        """
        response = self._post(self.build_payload(order_id, total_amount, lines))
        response.raise_for_status()

        qr_data = response.json().get("qr_data")
        if not qr_data:
            raise PaymentError(f"payment provider returned no QR code for order {order_id}")

        logger.info(f"QR code created for order {order_id}")
        return qr_data
