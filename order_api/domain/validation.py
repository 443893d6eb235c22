"""
Payload validation

Each validate_* function returns the ordered list of violations found in a
decoded request; an empty list means the payload is valid. The first
violation is the one reported to the client.

Author: TM3
Date: 2025-10-17
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from order_api.domain.cpf import is_valid_cpf
from order_api.domain.order import (
    ItemType,
    OrderRequest,
    OrderStatus,
    OrderStatusRequest,
)
from order_api.domain.product import ProductRequest

NON_ZERO_VALUE_REQUIRED = "non zero value required"


@dataclass(frozen=True)
class Violation:
    """A single broken rule, optionally tied to a field"""
    field: Optional[str]
    text: str

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.text}"
        return self.text


def _not_in(value, allowed: Iterable[str]) -> str:
    return f"{value} does not validate as in({'|'.join(allowed)})"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_product(product: ProductRequest) -> List[Violation]:
    """name and category are required; price must be positive"""
    violations = []

    if _is_blank(product.name):
        violations.append(Violation("name", NON_ZERO_VALUE_REQUIRED))
    if _is_blank(product.category):
        violations.append(Violation("category", NON_ZERO_VALUE_REQUIRED))
    if product.price is None or product.price <= 0:
        violations.append(Violation("price", NON_ZERO_VALUE_REQUIRED))

    return violations


def validate_order(order: OrderRequest) -> List[Violation]:
    """
    Validate an order creation payload

    Rules, in reporting order:
    - status must be one of the OrderStatus values
    - customer CPF, when given, must pass the checksum
    - at least one item, each with a positive quantity and a known type
    """
    violations = []

    if order.status not in OrderStatus.values():
        violations.append(Violation(None, "Status is invalid"))

    if order.customer_cpf and not is_valid_cpf(order.customer_cpf):
        violations.append(Violation(None, f"invalid CPF [{order.customer_cpf}]"))

    if not order.items:
        violations.append(Violation("items", NON_ZERO_VALUE_REQUIRED))

    for index, item in enumerate(order.items):
        prefix = f"items[{index}]"
        if not item.product_id or item.product_id <= 0:
            violations.append(Violation(f"{prefix}.productId", NON_ZERO_VALUE_REQUIRED))
        if not item.quantity or item.quantity <= 0:
            violations.append(Violation(f"{prefix}.quantity", NON_ZERO_VALUE_REQUIRED))
        if item.type is None:
            violations.append(Violation(f"{prefix}.type", NON_ZERO_VALUE_REQUIRED))
        elif item.type not in ItemType.values():
            violations.append(Violation(f"{prefix}.type", _not_in(item.type, ItemType.values())))

    return violations


def validate_order_status(payload: OrderStatusRequest) -> List[Violation]:
    """status must be present and one of the six lifecycle values"""
    if payload.status is None:
        return [Violation("status", NON_ZERO_VALUE_REQUIRED)]
    if payload.status not in OrderStatus.values():
        return [Violation("status", _not_in(payload.status, OrderStatus.values()))]
    return []
