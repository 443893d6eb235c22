"""
Order Domain Models

Represents order-related entities and the payloads exchanged with
the order endpoints.

Author: TM3
Date: 2025-10-17
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from order_api.domain.product import Product


class OrderStatus(str, Enum):
    """Lifecycle of an order, from checkout to pickup"""
    CREATED = "CREATED"
    PAID = "PAID"
    RECEIVED = "RECEIVED"
    IN_PROGRESS = "IN_PROGRESS"
    READY = "READY"
    DONE = "DONE"

    @classmethod
    def values(cls) -> List[str]:
        return [status.value for status in cls]


class ItemType(str, Enum):
    """How an order item is sold"""
    UNIT = "UNIT"

    @classmethod
    def values(cls) -> List[str]:
        return [item_type.value for item_type in cls]


_camel_config = ConfigDict(
    from_attributes=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        id: Internal order item ID
        quantity: Number of units ordered
        type: How the item is sold (UNIT)
        product: Snapshot of the product at order time
    """

    id: int = Field(..., description="Order item ID")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    type: ItemType = Field(ItemType.UNIT, description="Item type")
    product: Product = Field(..., description="Product snapshot")

    model_config = _camel_config

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", by_alias=True)
        data['product'] = self.product.to_dict()
        return data


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        id: Internal order ID (primary key)
        items: Ordered list of line items
        coupon: Discount coupon code (optional)
        total_amount: Sum of price * quantity over all items
        status: Current lifecycle status
        created_at: When order was created
        customer_cpf: Customer tax id (optional, anonymous orders have none)
    """

    id: int = Field(..., description="Order ID")
    items: List[OrderItem] = Field(default_factory=list, description="Order items")
    coupon: Optional[str] = Field(None, description="Coupon code")
    total_amount: Decimal = Field(..., description="Order total", ge=0)
    status: OrderStatus = Field(..., description="Order status")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    customer_cpf: Optional[str] = Field(None, description="Customer CPF")

    model_config = _camel_config

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump(mode="json", by_alias=True)
        data['items'] = [item.to_dict() for item in self.items]
        data['totalAmount'] = float(self.total_amount)
        return data


class OrderItemRequest(BaseModel):
    """Line item of an order creation payload"""
    product_id: Optional[int] = None
    quantity: Optional[int] = None
    type: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderRequest(BaseModel):
    """Payload for creating an order"""
    items: List[OrderItemRequest] = Field(default_factory=list)
    coupon: Optional[str] = None
    status: Optional[str] = None
    customer_cpf: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderStatusRequest(BaseModel):
    """Payload for moving an order to another status"""
    status: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderCreationResponse(BaseModel):
    """What the customer needs to pay for a freshly created order"""
    qr_code: str
    order_id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class OrderStatusDTO(BaseModel):
    status: str

    def to_dict(self) -> dict:
        return self.model_dump()
