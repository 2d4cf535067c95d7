"""
Cart item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from shared.domain import BaseEntity
from ..exceptions import InvalidQuantityError

MAX_QUANTITY_PER_ITEM = 99


@dataclass(eq=False)
class CartItem(BaseEntity):
    """
    One line of a user's cart.

    ``product_name`` and ``unit_price`` are snapshots taken from the catalog
    when the line is written; sync refreshes the price.
    """
    user_id: int
    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int = 1

    def __post_init__(self):
        self.validate_quantity(self.quantity)
        if not isinstance(self.unit_price, Decimal):
            self.unit_price = Decimal(str(self.unit_price))

    @classmethod
    def create(
        cls,
        user_id: int,
        product_id: int,
        product_name: str,
        unit_price: Decimal,
        quantity: int,
    ) -> 'CartItem':
        """Factory method to create a new cart line."""
        return cls(
            user_id=user_id,
            product_id=product_id,
            product_name=product_name,
            unit_price=unit_price,
            quantity=quantity,
        )

    @staticmethod
    def validate_quantity(quantity: Any) -> int:
        """Quantities are plain ints in ``1..MAX_QUANTITY_PER_ITEM``."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityError(quantity, limit=MAX_QUANTITY_PER_ITEM)
        if quantity < 1 or quantity > MAX_QUANTITY_PER_ITEM:
            raise InvalidQuantityError(quantity, limit=MAX_QUANTITY_PER_ITEM)
        return quantity

    def change_quantity(self, quantity: int) -> None:
        self.quantity = self.validate_quantity(quantity)
        self.touch()

    def refresh_price(self, unit_price: Decimal) -> bool:
        """Adopt the current catalog price. Returns True when it changed."""
        if unit_price == self.unit_price:
            return False
        self.unit_price = unit_price
        self.touch()
        return True

    def belongs_to(self, user_id: int) -> bool:
        return self.user_id == user_id

    @property
    def subtotal(self) -> Decimal:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity
