"""
Cart read aggregate.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .cart_item import CartItem

MAX_CART_ITEMS = 50


@dataclass
class Cart:
    """
    All cart lines of one user.

    Lines are persisted individually; this object is assembled on read and is
    never saved as a whole.
    """
    user_id: int
    items: List[CartItem] = field(default_factory=list)

    def find_item(self, product_id: int) -> Optional[CartItem]:
        """Find an item in the cart by product ID."""
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def subtotal(self) -> Decimal:
        """Sum of line subtotals; zero for an empty cart."""
        return sum((item.subtotal for item in self.items), Decimal('0'))

    @property
    def item_count(self) -> int:
        """Number of lines."""
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return not self.items

    @property
    def is_full(self) -> bool:
        return len(self.items) >= MAX_CART_ITEMS
