"""
Cart item repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.cart_item import CartItem


class CartItemRepository(ABC):
    """Abstract repository for cart lines."""

    @abstractmethod
    def save(self, cart_item: CartItem) -> CartItem:
        """Insert or update a cart line."""
        pass

    @abstractmethod
    def find_by_id(self, cart_item_id: int) -> Optional[CartItem]:
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> List[CartItem]:
        """All lines of a user in insertion order."""
        pass

    @abstractmethod
    def find_by_user_and_product(self, user_id: int, product_id: int) -> Optional[CartItem]:
        pass

    @abstractmethod
    def count_by_user(self, user_id: int) -> int:
        pass

    @abstractmethod
    def delete(self, cart_item_id: int) -> bool:
        pass

    @abstractmethod
    def delete_by_user_id(self, user_id: int) -> int:
        """Remove every line of a user; returns how many were removed."""
        pass
