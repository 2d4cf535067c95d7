"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.category import Category


class CategoryRepository(ABC):
    """Abstract repository for Category."""

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Insert or update a category and return the stored state."""
        pass

    @abstractmethod
    def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by ID."""
        pass

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[Category]:
        """Find a category by slug."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by exact name."""
        pass

    @abstractmethod
    def exists_by_id(self, category_id: int) -> bool:
        pass

    @abstractmethod
    def exists_by_slug(self, slug: str) -> bool:
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        pass

    @abstractmethod
    def find_children(self, parent_id: Optional[int], active_only: bool = False) -> List[Category]:
        """Direct children of ``parent_id`` (roots when None), ordered by sort order then id."""
        pass

    @abstractmethod
    def find_all(self, is_active: Optional[bool] = None) -> List[Category]:
        """All categories ordered by sort order then id, optionally filtered by status."""
        pass

    @abstractmethod
    def search(self, keyword: str, offset: int = 0, limit: int = 20) -> List[Category]:
        """Active categories whose name or description contains the keyword."""
        pass

    @abstractmethod
    def count(self, is_active: Optional[bool] = None) -> int:
        pass

    @abstractmethod
    def delete(self, category_id: int) -> bool:
        """Delete a category."""
        pass
