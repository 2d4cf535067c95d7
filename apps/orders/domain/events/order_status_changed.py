"""
Order status changed domain event.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderStatusChanged(DomainEvent):
    """Event raised when order status changes."""
    order_id: Optional[int]
    old_status: str
    new_status: str
