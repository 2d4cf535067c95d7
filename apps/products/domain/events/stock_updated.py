"""
Stock updated domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class StockUpdated(DomainEvent):
    """Event raised when product stock is updated."""
    product_id: int
    previous_quantity: int
    new_quantity: int
