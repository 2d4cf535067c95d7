"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product aggregate."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Save a product."""
        pass

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Find a product by SKU."""
        pass

    @abstractmethod
    def find_all(
        self,
        category_id: Optional[int] = None,
        is_active: Optional[bool] = True,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Product]:
        """Find all products with optional filters."""
        pass

    @abstractmethod
    def count_by_category(self, category_id: int) -> int:
        """Count products linked to a category, active or not."""
        pass

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Delete a product."""
        pass
