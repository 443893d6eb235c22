"""
Product Domain Model

Represents a product entity of the food catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    This model matches the database schema and provides type safety
    for all product-related operations.

    Fields:
        id: Internal product ID (primary key)
        name: Product name
        sku_id: Stock Keeping Unit code
        description: Product description (optional)
        category: Free-text category label (Lanche, Acompanhamento, Bebida...)
        price: Unit price, always positive
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: int = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    sku_id: Optional[str] = Field(None, description="Stock Keeping Unit")
    description: Optional[str] = Field(None, description="Product description")
    category: str = Field(..., description="Product category")
    price: Decimal = Field(..., description="Unit price", gt=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        """
        Convert to a JSON-ready dictionary with camelCase keys

        Decimal price is converted to float for JSON compatibility.
        """
        data = self.model_dump(mode="json", by_alias=True)
        data['price'] = float(self.price)
        return data


class ProductRequest(BaseModel):
    """
    Payload for creating or updating a product

    Every field is optional at decode time; required fields are enforced
    by the validator so that violations are reported per field.
    """
    name: Optional[str] = None
    sku_id: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
