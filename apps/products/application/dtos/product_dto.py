"""
Product DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ...domain.entities.product import Product
from ...domain.value_objects.money import DEFAULT_CURRENCY


@dataclass
class ProductCreateDTO:
    """DTO for registering a product in the catalog."""
    name: str
    sku: str
    price: Decimal
    stock_quantity: int = 0
    category_id: Optional[int] = None
    description: str = ""
    currency: str = DEFAULT_CURRENCY


@dataclass
class ProductDTO:
    """DTO for product output."""
    id: int
    name: str
    description: str
    sku: str
    price: Decimal
    currency: str
    stock_quantity: int
    category_id: Optional[int]
    is_active: bool
    is_in_stock: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """Create DTO from entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            sku=product.sku.value,
            price=product.price.amount,
            currency=product.price.currency,
            stock_quantity=product.stock.quantity,
            category_id=product.category_id,
            is_active=product.is_active,
            is_in_stock=product.is_in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
