"""
Product entity (Aggregate Root).
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from shared.domain import AggregateRoot
from ..value_objects.money import Money, DEFAULT_CURRENCY
from ..value_objects.sku import SKU
from ..value_objects.stock import Stock
from ..events.stock_updated import StockUpdated
from ..exceptions import InsufficientStockError, InvalidProductError


@dataclass(eq=False)
class Product(AggregateRoot):
    """Product entity representing a sellable item."""
    name: str
    sku: SKU
    price: Money
    stock: Stock
    description: str = ""
    category_id: Optional[int] = None
    is_active: bool = True

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.name or len(self.name) < 2:
            raise InvalidProductError("Product name must be at least 2 characters", field="name")
        if self.price.amount < 0:
            raise InvalidProductError("Price must be non-negative", field="price")

    @classmethod
    def create(
        cls,
        name: str,
        sku: str,
        price: Decimal,
        stock_quantity: int = 0,
        category_id: Optional[int] = None,
        description: str = "",
        currency: str = DEFAULT_CURRENCY,
    ) -> 'Product':
        """Factory method to create a new product."""
        return cls(
            name=name,
            description=description,
            sku=SKU(value=sku),
            price=Money(amount=price, currency=currency),
            stock=Stock(quantity=stock_quantity),
            category_id=category_id,
        )

    def change_price(self, amount: Decimal) -> None:
        self.price = Money(amount=amount, currency=self.price.currency)
        self._validate()
        self.touch()

    def has_enough_stock(self, quantity: int) -> bool:
        return self.stock.covers(quantity)

    def decrease_stock(self, quantity: int) -> None:
        """Decrease stock by the given quantity."""
        if not self.stock.covers(quantity):
            raise InsufficientStockError(
                product_id=self.id,
                requested=quantity,
                available=self.stock.quantity,
            )
        self._set_stock(self.stock.decrease(quantity))

    def increase_stock(self, quantity: int) -> None:
        """Increase stock by the given quantity."""
        self._set_stock(self.stock.increase(quantity))

    def set_stock(self, quantity: int) -> None:
        self._set_stock(Stock(quantity=quantity))

    def _set_stock(self, stock: Stock) -> None:
        previous = self.stock.quantity
        self.stock = stock
        self.touch()
        self.add_domain_event(
            StockUpdated(
                product_id=self.id,
                previous_quantity=previous,
                new_quantity=stock.quantity,
            )
        )

    def deactivate(self) -> None:
        """Deactivate the product."""
        self.is_active = False
        self.touch()

    def activate(self) -> None:
        """Activate the product."""
        self.is_active = True
        self.touch()

    @property
    def unit_price(self) -> Decimal:
        return self.price.amount

    @property
    def is_in_stock(self) -> bool:
        """Check if product is in stock."""
        return self.stock.is_available
