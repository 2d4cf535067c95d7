"""
Order item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from shared.domain import BaseEntity


@dataclass(eq=False)
class OrderItem(BaseEntity):
    """Frozen snapshot of a product line at order time. Never updated after creation."""
    product_id: int
    product_name: str
    product_sku: str
    quantity: int
    unit_price: Decimal
    discount_amount: Decimal = Decimal('0')
    order_id: Optional[int] = None

    @property
    def subtotal(self) -> Decimal:
        """Line total after the line discount."""
        return self.unit_price * self.quantity - self.discount_amount
