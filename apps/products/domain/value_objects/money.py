"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import ValueObject

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money(ValueObject):
    """Exact decimal amount with a currency. Never backed by float."""
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Route through str so floats do not leak binary noise into the amount
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        return cls(amount=Decimal('0'), currency=currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"
