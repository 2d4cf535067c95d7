"""
Stock value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

LOW_STOCK_THRESHOLD = 10


@dataclass(frozen=True)
class Stock(ValueObject):
    """On-hand stock quantity value object."""
    quantity: int

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError("Stock quantity cannot be negative")

    def covers(self, requested: int) -> bool:
        """Check whether the requested quantity can be served."""
        return requested <= self.quantity

    def decrease(self, amount: int) -> 'Stock':
        return Stock(quantity=self.quantity - amount)

    def increase(self, amount: int) -> 'Stock':
        return Stock(quantity=self.quantity + amount)

    @property
    def is_available(self) -> bool:
        """Check if stock is available."""
        return self.quantity > 0

    @property
    def is_low(self) -> bool:
        """Check if stock is below the low-stock threshold."""
        return self.quantity < LOW_STOCK_THRESHOLD
