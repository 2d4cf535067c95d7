"""
Order placed domain event.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    """Event raised when a new order is placed."""
    order_number: str
    user_id: int
    total_amount: Decimal
