"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Save an order. Items are written only when the order is first stored."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Find an order by ID."""
        pass

    @abstractmethod
    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order by order number."""
        pass

    @abstractmethod
    def find_by_user_id(
        self,
        user_id: int,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """Find orders by user ID, newest first."""
        pass

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Delete an order and its items."""
        pass
